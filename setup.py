from setuptools import setup, find_packages

setup(
    name='puffin-lang',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=['pyarrow'],  # int64 arithmetic and the CSV variable dump
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'puffin=puffin.cli:main'  # Entry point to main function
        ]
    },
    author='Puffin Team',
    description='An interpreter for Puffin, a minimal pattern-action scripting language',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='LGPLv3.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    python_requires='>=3.8',
)
