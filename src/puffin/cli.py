import sys
import argparse
import os
from .errors import PuffinError
from .main import run_puffin


def main(argv=None):
    parser = argparse.ArgumentParser(description='Puffin Language Interpreter')
    parser.add_argument('filename', help="Path to the Puffin source file to execute, or '-' for stdin")
    parser.add_argument('--debug', action='store_true',
                        help='Trace pipeline stages and save the final variable state in CSV format')

    args = parser.parse_args(argv)

    try:
        if args.filename == '-':
            code = sys.stdin.read()
        else:
            with open(args.filename, 'r', encoding='utf-8') as file:
                code = file.read()

        environment = run_puffin(code, debug=args.debug)

        # In debug mode, save the variable state next to the source file
        if args.debug and args.filename != '-':
            csv_filename = os.path.splitext(args.filename)[0] + '.csv'
            with open(csv_filename, 'w', newline='') as csvfile:
                csvfile.write(environment.to_csv())
            print(f"Variable state saved to: {csv_filename}", file=sys.stderr)

    except FileNotFoundError:
        print(f"Error: File '{args.filename}' not found", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except PuffinError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
