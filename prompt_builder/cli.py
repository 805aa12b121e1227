"""prompt-builder CLI entry point."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="prompt-builder",
        description="Prompt Builder — messy ideas to structured video prompts",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log extraction and generation details to stderr",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    new_parser = sub.add_parser("new", help="Write a default draft JSON file")
    new_parser.add_argument(
        "--output", required=True, metavar="draft.json",
        help="Destination path for the new draft",
    )

    extract_parser = sub.add_parser(
        "extract",
        help="Infer draft fields from free-form text and merge them into a draft",
    )
    source = extract_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", metavar="TEXT", help="Free-form idea text")
    source.add_argument(
        "--text-file", metavar="ideas.txt",
        help="Path to a UTF-8 file holding the idea text",
    )
    extract_parser.add_argument(
        "--draft", metavar="draft.json",
        help="Draft to merge into (default: a fresh default draft)",
    )
    extract_parser.add_argument(
        "--output", required=True, metavar="draft.json",
        help="Destination path for the merged draft",
    )

    edit_parser = sub.add_parser("edit", help="Apply one typed update to a draft")
    edit_parser.add_argument(
        "--draft", required=True, metavar="draft.json",
        help="Path to a draft JSON file",
    )
    edit_parser.add_argument(
        "--update", required=True, metavar="JSON",
        help='Update object, e.g. \'{"op": "set_title", "value": "Night Run"}\'',
    )
    edit_parser.add_argument(
        "--output", metavar="draft.json",
        help="Destination path (default: overwrite --draft)",
    )

    validate_parser = sub.add_parser("validate", help="Validate a draft JSON file")
    validate_parser.add_argument(
        "--draft", required=True, metavar="draft.json",
        help="Path to a draft JSON file",
    )

    generate_parser = sub.add_parser(
        "generate",
        help="Validate a draft → canonical StructuredPrompt JSON",
    )
    generate_parser.add_argument(
        "--draft", required=True, metavar="draft.json",
        help="Path to a draft JSON file",
    )
    generate_parser.add_argument(
        "--output", metavar="prompt.json",
        help="Destination path (default: print to stdout)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "new":
        from prompt_builder.drafting.models import default_prompt
        from prompt_builder.schemas.draft_v1 import save_draft
        save_draft(Path(args.output), default_prompt())
        print(f"OK: wrote {args.output}")
        sys.exit(0)
    elif args.command == "extract":
        extract_draft(args)
    elif args.command == "edit":
        edit_draft(args)
    elif args.command == "validate":
        validate_draft_command(Path(args.draft))
    elif args.command == "generate":
        generate_prompt(Path(args.draft), Path(args.output) if args.output else None)
    else:
        parser.print_help()
        sys.exit(1)


def _load_draft_or_exit(draft_path: Path):
    """Structurally load a draft for editing; print ERROR and exit 1 if unreadable."""
    from pydantic import ValidationError
    from prompt_builder.schemas.draft_v1 import load_draft

    try:
        return load_draft(draft_path)
    except FileNotFoundError:
        print(f"ERROR: draft file not found: {draft_path}")
    except json.JSONDecodeError as exc:
        print(f"ERROR: invalid JSON in {draft_path}: {exc}")
    except ValidationError as exc:
        print(f"ERROR: {draft_path} is not a complete draft ({exc.error_count()} error(s))")
    sys.exit(1)


def extract_draft(args: argparse.Namespace) -> None:
    """Merge text-derived fields into a draft and write it to --output."""
    from prompt_builder.drafting.extractor import idea_to_draft
    from prompt_builder.drafting.models import default_prompt
    from prompt_builder.schemas.draft_v1 import save_draft

    if args.text_file:
        try:
            text = Path(args.text_file).read_text(encoding="utf-8")
        except FileNotFoundError:
            print(f"ERROR: text file not found: {args.text_file}")
            sys.exit(1)
    else:
        text = args.text

    current = _load_draft_or_exit(Path(args.draft)) if args.draft else default_prompt()
    save_draft(Path(args.output), idea_to_draft(text, current))
    print(f"OK: wrote {args.output}")
    sys.exit(0)


def edit_draft(args: argparse.Namespace) -> None:
    """Apply one update and write the result (in place unless --output is given)."""
    from prompt_builder.drafting.errors import DraftEditError
    from prompt_builder.drafting.updates import apply_update, parse_update
    from prompt_builder.schemas.draft_v1 import save_draft

    draft_path = Path(args.draft)
    draft = _load_draft_or_exit(draft_path)
    try:
        edited = apply_update(draft, parse_update(args.update))
    except DraftEditError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    output_path = Path(args.output) if args.output else draft_path
    save_draft(output_path, edited)
    print(f"OK: wrote {output_path}")
    sys.exit(0)


def validate_draft_command(draft_path: Path) -> None:
    """Print every violation (exit 1) or ``OK`` plus advisory warnings (exit 0)."""
    from prompt_builder.validator import duration_warnings, load_draft_json, validate_draft

    try:
        result = validate_draft(load_draft_json(draft_path))
    except ValueError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    if isinstance(result, list):
        for error in result:
            print(f"ERROR: {error}")
        sys.exit(1)

    for warning in duration_warnings(result):
        print(f"WARNING: {warning}")
    print("OK: draft is valid")
    sys.exit(0)


def generate_prompt(draft_path: Path, output_path: Path | None) -> None:
    """Validate → generate → contract-check, then write or print the prompt.

    The output file is never written when any step fails.
    """
    import jsonschema  # noqa: PLC0415
    from prompt_builder.drafting.errors import (
        DraftValidationError,
        UnresolvedCharacterReference,
    )
    from prompt_builder.drafting.generator import generate_structured_prompt
    from prompt_builder.schemas.structured_prompt_v1 import dump_structured_prompt
    from prompt_builder.validator import parse_draft

    try:
        data = json.loads(draft_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        print(f"ERROR: draft file not found: {draft_path}")
        sys.exit(1)
    except json.JSONDecodeError as exc:
        print(f"ERROR: invalid JSON in {draft_path}: {exc}")
        sys.exit(1)

    try:
        prompt = generate_structured_prompt(parse_draft(data))
    except DraftValidationError as exc:
        for error in exc.errors:
            print(f"ERROR: {error}")
        sys.exit(1)
    except UnresolvedCharacterReference as exc:
        for key, character_id in exc.unresolved:
            print(
                f"ERROR: consistency.characterIdMap.{key} references unknown "
                f"character id '{character_id}'"
            )
        sys.exit(1)
    except jsonschema.ValidationError as exc:
        print(f"ERROR: invalid StructuredPrompt — {exc.message}")
        sys.exit(1)

    payload = dump_structured_prompt(prompt)
    if output_path is None:
        print(payload)
    else:
        output_path.write_text(payload + "\n", encoding="utf-8")
        print(f"OK: wrote {output_path}")
    sys.exit(0)


if __name__ == "__main__":
    main()
