"""Versioned draft and structured-prompt serializers."""

from prompt_builder.schemas.draft_v1 import dump_draft, load_draft, save_draft
from prompt_builder.schemas.structured_prompt_v1 import (
    dump_structured_prompt,
    load_structured_prompt,
)

__all__ = [
    "load_draft",
    "dump_draft",
    "save_draft",
    "load_structured_prompt",
    "dump_structured_prompt",
]
