"""
Entry point for serializable-dict-tool.

Usage:
    serializable-dict show FILE                        # List dictionary fields
    serializable-dict check FILE...                    # Report malformed snapshots
    serializable-dict get FILE FIELD KEY               # Print one value
    serializable-dict set FILE FIELD KEY VALUE         # Add or overwrite an entry
    serializable-dict add FILE FIELD KEY VALUE         # Add an entry if the key is new
    serializable-dict remove FILE FIELD KEY            # Remove an entry
    serializable-dict clean FILE                       # Rewrite every field from its snapshot

FIELD is "FILE_ID:PROPERTY_PATH", or just "PROPERTY_PATH" when unique.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from serializable_dict_tool import __version__
from serializable_dict_tool.core.loader import (
    DEFAULT_KEYS_FIELD,
    DEFAULT_VALUES_FIELD,
    SerializedDictionaryLoader,
)
from serializable_dict_tool.core.serializable_dict import KeyNotFoundError
from serializable_dict_tool.core.unity_model import DictionaryDocument, IncompleteFieldError
from serializable_dict_tool.core.writer import DictionaryFieldWriter
from serializable_dict_tool.utils.log_handler import setup_logging
from serializable_dict_tool.utils.parsing import freeze_value, parse_scalar, thaw_value

UNITY_EXTENSIONS = {
    ".prefab", ".unity", ".asset", ".anim", ".controller",
    ".mat", ".physicmaterial", ".mixer", ".preset",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="serializable-dict",
        description="Inspect and edit serialized dictionaries in Unity files",
    )
    parser.add_argument(
        "--keys-field",
        default=DEFAULT_KEYS_FIELD,
        help=f"Serialized name of the keys list (default: {DEFAULT_KEYS_FIELD})",
    )
    parser.add_argument(
        "--values-field",
        default=DEFAULT_VALUES_FIELD,
        help=f"Serialized name of the values list (default: {DEFAULT_VALUES_FIELD})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="List dictionary fields and entries")
    show.add_argument("file", type=Path)

    check = commands.add_parser("check", help="Report malformed snapshots")
    check.add_argument("files", nargs="+", type=Path)

    get = commands.add_parser("get", help="Print the value stored under a key")
    get.add_argument("file", type=Path)
    get.add_argument("field")
    get.add_argument("key")

    for name, help_text in (
        ("set", "Add or overwrite an entry"),
        ("add", "Add an entry if the key is not present"),
    ):
        edit = commands.add_parser(name, help=help_text)
        edit.add_argument("file", type=Path)
        edit.add_argument("field")
        edit.add_argument("key")
        edit.add_argument("value")
        edit.add_argument("--output", "-o", type=Path, help="Write to this file instead")

    remove = commands.add_parser("remove", help="Remove an entry")
    remove.add_argument("file", type=Path)
    remove.add_argument("field")
    remove.add_argument("key")
    remove.add_argument("--output", "-o", type=Path, help="Write to this file instead")

    clean = commands.add_parser("clean", help="Drop duplicate keys and unpaired entries")
    clean.add_argument("file", type=Path)
    clean.add_argument("--output", "-o", type=Path, help="Write to this file instead")

    return parser


def validate_files(paths: list[Path]) -> bool:
    """Validate that all files exist and are Unity files."""
    for path in paths:
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            return False
        if path.suffix.lower() not in UNITY_EXTENSIONS:
            print(f"Warning: Unknown file type: {path.suffix}", file=sys.stderr)
    return True


def format_value(value: Any) -> str:
    """Format a key or value for terminal output."""
    value = thaw_value(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def print_document(doc: DictionaryDocument) -> None:
    if not doc.fields:
        print(f"{doc.file_path}: no dictionary fields")
        return

    for field in doc.fields:
        print(f"{field.selector}  ({field.display_name}, {field.entry_count} entries)")
        for key, value in field.dictionary.entries():
            print(f"    {format_value(key)}: {format_value(value)}")
        for issue in field.issues:
            print(f"    ! {issue.value.replace('_', ' ')}")


def run_check(loader: SerializedDictionaryLoader, files: list[Path], handler) -> int:
    exit_code = 0
    for path in files:
        handler.clear()
        doc = loader.load(path)
        warnings = handler.count(logging.WARNING)
        if doc.issue_count or warnings:
            exit_code = 1
            print(f"{path}: {doc.issue_count} issues in {doc.field_count} fields")
            for record in handler.get_records(min_level=logging.WARNING):
                print(f"  {record.format()}")
        else:
            print(f"{path}: OK ({doc.field_count} fields)")
    return exit_code


def run_edit(
    args: argparse.Namespace,
    loader: SerializedDictionaryLoader,
    writer: DictionaryFieldWriter,
) -> int:
    doc = loader.load(args.file)
    output: Optional[Path] = getattr(args, "output", None)

    if args.command == "clean":
        count = writer.write(doc, output)
        print(f"Cleaned {count} fields")
        return 0

    field = doc.find_field(args.field)
    key = freeze_value(parse_scalar(args.key))

    if args.command == "get":
        print(format_value(field.dictionary[key]))
        return 0

    if args.command == "remove":
        if not field.dictionary.remove(key):
            print(f"Error: Key {args.key!r} not found in {field.selector}", file=sys.stderr)
            return 1
    elif args.command == "add":
        if key in field.dictionary:
            print(f"Key {args.key!r} already present, left unchanged")
            return 0
        field.dictionary.add(key, parse_scalar(args.value))
    else:
        field.dictionary.set(key, parse_scalar(args.value))

    writer.write(doc, output, fields=[field])
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    handler = setup_logging(level=logging.DEBUG if args.verbose else logging.ERROR)

    files = args.files if args.command == "check" else [args.file]
    if not validate_files(files):
        return 1

    loader = SerializedDictionaryLoader(args.keys_field, args.values_field)
    writer = DictionaryFieldWriter(args.keys_field, args.values_field)

    try:
        if args.command == "show":
            print_document(loader.load(args.file))
            return 0
        if args.command == "check":
            return run_check(loader, files, handler)
        return run_edit(args, loader, writer)
    except KeyNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except LookupError as e:
        print(f"Error: {e.args[0] if e.args else e}", file=sys.stderr)
        return 1
    except IncompleteFieldError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
