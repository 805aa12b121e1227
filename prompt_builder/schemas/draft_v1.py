"""Draft schema v1.0.0 — load, dump, save.

load_draft() is a structural parse only (every field present, right types);
invariant checks belong to prompt_builder.validator.  Drafts are written in
model field order with a fixed 2-space indent so the same draft always
produces the same bytes.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from prompt_builder.drafting.models import Draft


def load_draft(source: Union[str, bytes, dict, Path]) -> Draft:
    """Parse a Draft from JSON string, bytes, dict, or file Path.

    Raises:
        ValidationError: data is not a structurally complete Draft.
        FileNotFoundError: Path does not exist.
    """
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    elif isinstance(source, (str, bytes)):
        data = json.loads(source)
    else:
        data = source
    return Draft.model_validate(data)


def dump_draft(draft: Draft, *, indent: int = 2) -> str:
    """Serialize a Draft to JSON with camelCase keys in field order."""
    return json.dumps(draft.model_dump(mode="json", by_alias=True), indent=indent, ensure_ascii=False)


def save_draft(path: Path, draft: Draft) -> None:
    """Write *draft* to *path* (created or overwritten) with a trailing newline."""
    path.write_text(dump_draft(draft) + "\n", encoding="utf-8")
