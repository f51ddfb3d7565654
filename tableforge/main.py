import argparse
import json
import os
import sys

from tableforge.exceptions import TableForgeError
from tableforge.exporter import export
from tableforge.logging_config import setup_logging, get_logger


def read_version() -> str:
    version_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'VERSION')
    if os.path.exists(version_path):
        with open(version_path, 'r') as f:
            return f.read().strip()
    return 'Unknown'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='TableForge - MySQL CREATE TABLE schema extraction')
    parser.add_argument('command', choices=['extract'], help='Command to execute')
    parser.add_argument('source', help='Path to a SQL file, or SQL text')

    parser.add_argument('--format', choices=['text', 'json'], default='text', help='Output format on stdout')
    parser.add_argument('--json-out', help='Path to save the extracted tables as JSON')
    parser.add_argument('--strict', action='store_true', help='Exit non-zero when any diagnostic was recorded')

    # Quality of Life flags
    parser.add_argument('--no-color', action='store_true', help='Disable colored log output')
    parser.add_argument('--verbose', '-v', action='count', default=0, help='Increase log verbosity (-v, -vv)')
    parser.add_argument('--log-format', choices=['text', 'json'], default='text', help='Log output format')
    parser.add_argument('--version', action='version', version=f'TableForge v{read_version()}')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_format=args.log_format, no_color=args.no_color)
    logger = get_logger("cli")
    logger.debug(f"Command={args.command}, Format={args.format}, Strict={args.strict}")

    try:
        result = export(args.source)
    except TableForgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == 'json':
        print(json.dumps(result.to_dict(), indent=2))
    else:
        for table in result.tables:
            print(table)
        if not result.tables:
            print("No tables found.")

    if args.json_out:
        with open(args.json_out, 'w') as f:
            json.dump(result.to_dict(), f, indent=2)
        print(f"JSON output saved to {args.json_out}", file=sys.stderr)

    if args.strict and result.diagnostics:
        print(f"Error: {len(result.diagnostics)} diagnostic(s) recorded in strict mode", file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
