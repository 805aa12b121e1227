"""StructuredPrompt schema v1.0.0: load, dump.

Keys are emitted in model field order (which mirrors the Draft), not sorted:
the downstream consumer reads the prompt top to bottom.  Field order is fixed
by the model, so identical prompts still serialize to identical bytes.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from prompt_builder.drafting.models import StructuredPrompt


def load_structured_prompt(source: Union[str, bytes, dict, Path]) -> StructuredPrompt:
    """Parse a StructuredPrompt from JSON string, bytes, dict, or file Path.

    Raises:
        ValidationError: data does not conform to the StructuredPrompt model.
        FileNotFoundError: Path does not exist.
    """
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    elif isinstance(source, (str, bytes)):
        data = json.loads(source)
    else:
        data = source
    return StructuredPrompt.model_validate(data)


def dump_structured_prompt(prompt: StructuredPrompt, *, indent: int = 2) -> str:
    """Serialize a StructuredPrompt to pretty-printed JSON in field order."""
    raw = prompt.model_dump(mode="json", by_alias=True)
    return json.dumps(raw, indent=indent, ensure_ascii=False)


def canonical_json_bytes(prompt: StructuredPrompt) -> bytes:
    """Return the canonical UTF-8 bytes of a StructuredPrompt.

    Identical algorithm to dump_structured_prompt() but returns bytes, not str.
    """
    return dump_structured_prompt(prompt).encode("utf-8")
