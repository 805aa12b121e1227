"""Draft model, idea extraction, edits and structured generation."""

from prompt_builder.drafting.errors import (
    DraftEditError,
    DraftValidationError,
    FieldError,
    UnresolvedCharacterReference,
)
from prompt_builder.drafting.extractor import idea_to_draft
from prompt_builder.drafting.generator import generate_structured_prompt
from prompt_builder.drafting.models import (
    Draft,
    StructuredPrompt,
    ValidatedDraft,
    default_prompt,
)
from prompt_builder.drafting.updates import apply_update, parse_update

__all__ = [
    "apply_update",
    "default_prompt",
    "generate_structured_prompt",
    "idea_to_draft",
    "parse_update",
    "Draft",
    "DraftEditError",
    "DraftValidationError",
    "FieldError",
    "StructuredPrompt",
    "UnresolvedCharacterReference",
    "ValidatedDraft",
]
