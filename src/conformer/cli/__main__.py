"""
Command line entry point for Conformer.

Usage:
    python -m conformer.cli <command> [options]

Available commands:
    generate  - Print generated artifacts for the tables of a schema file
    list      - List the tables declared in a schema file
    types     - List the registered value-type tokens

Examples:
    # Every artifact for every table
    python -m conformer.cli generate schemas/tasks.yml

    # Only the CREATE TABLE statement of one table
    python -m conformer.cli generate schemas/tasks.yml --table TaskThing --artifact ddl
"""

import argparse
import sys
from typing import List, Optional

from conformer.codegen.artifacts import ARTIFACT_SECTIONS, generate_artifacts
from conformer.errors import SchemaLoaderError
from conformer.infrastructure.schema.loader import load_schema_file
from conformer.infrastructure.schema.type_registry import get_type_registry


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conformer.cli",
        description="Conformer CLI - generate persistence artifacts from table schemas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Print generated artifacts",
        description="Generate artifacts for the tables declared in a schema file",
    )
    generate_parser.add_argument("schema", help="Path to the YAML schema file")
    generate_parser.add_argument(
        "--table",
        action="append",
        dest="tables",
        help="Only generate this table (type name); may be repeated",
    )
    generate_parser.add_argument(
        "--artifact",
        choices=["all", *ARTIFACT_SECTIONS],
        default="all",
        help="Artifact to print (default: all)",
    )
    generate_parser.add_argument(
        "--no-if-not-exists",
        action="store_true",
        help="Emit CREATE TABLE without IF NOT EXISTS",
    )

    list_parser = subparsers.add_parser("list", help="List declared tables")
    list_parser.add_argument("schema", help="Path to the YAML schema file")

    subparsers.add_parser("types", help="List registered value-type tokens")
    return parser


def _run_generate(args: argparse.Namespace) -> int:
    declarations = load_schema_file(args.schema)
    # Fail the command on a bad overrides file instead of emitting placeholders
    registry = get_type_registry()
    if args.tables:
        known = {d.type_name for d in declarations}
        missing = [t for t in args.tables if t not in known]
        if missing:
            print(f"Unknown table(s): {', '.join(missing)}", file=sys.stderr)
            return 1
        declarations = [d for d in declarations if d.type_name in args.tables]

    if_not_exists = False if args.no_if_not_exists else None
    outputs: List[str] = []
    for declaration in declarations:
        artifact = generate_artifacts(declaration, registry, if_not_exists=if_not_exists)
        if args.artifact == "all":
            outputs.append(artifact.render())
        else:
            outputs.append(artifact.section(args.artifact))
    print("\n\n".join(outputs))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "generate":
            return _run_generate(args)
        elif args.command == "list":
            for declaration in load_schema_file(args.schema):
                print(f"{declaration.type_name}\t{declaration.resolved_table_name}")
            return 0
        elif args.command == "types":
            registry = get_type_registry()
            for token in registry.tokens():
                print(f"{token}\t{registry.resolve(token).value}")
            return 0
    except SchemaLoaderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
