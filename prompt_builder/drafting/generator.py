"""ValidatedDraft → StructuredPrompt generator.

Public entry point
------------------
    generate_structured_prompt(draft) -> StructuredPrompt

Pure: no I/O, no randomness, no clock.  The seed is the user's, echoed
verbatim; nothing is generated here.

Consistency guarantees
----------------------
- every consistency.characterIdMap entry is resolved to the full character
  (id, name, description, wardrobe) under consistency.characterReferences;
  an id with no matching character raises UnresolvedCharacterReference and
  no output is produced
- characters, locations, shots, inspirations, avoid list and negative
  prompts keep their draft order
- every draft field is present in the output
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from prompt_builder.drafting.errors import (
    DraftValidationError,
    UnresolvedCharacterReference,
)
from prompt_builder.drafting.models import (
    SCHEMA_VERSION,
    StructuredPrompt,
    ValidatedDraft,
)

logger = logging.getLogger(__name__)


def generate_structured_prompt(draft: ValidatedDraft) -> StructuredPrompt:
    """Turn a validated draft into the structured prompt for the video model.

    Args:
        draft: A ValidatedDraft as returned by validator.parse_draft() or
               validator.validate_draft().  A plain Draft is rejected so an
               unvalidated shape can never reach the output.

    Returns:
        A StructuredPrompt conforming to contracts/StructuredPrompt.v1.json.

    Raises:
        TypeError:                    *draft* is not a ValidatedDraft.
        DraftValidationError:         *draft* was changed after validation
                                      and no longer satisfies the draft rules.
        UnresolvedCharacterReference: a characterIdMap value names no character.
    """
    if not isinstance(draft, ValidatedDraft):
        raise TypeError(
            "generate_structured_prompt() requires a ValidatedDraft; "
            f"got {type(draft).__name__} (run validator.parse_draft first)"
        )

    # Local imports avoid a circular import via drafting/__init__.py → generator
    from prompt_builder.contract_validate import validate_structured_prompt_model  # noqa: PLC0415
    from prompt_builder.validator import validate_draft_rules  # noqa: PLC0415

    # Nested lists of a ValidatedDraft are still mutable; check the snapshot
    # that is actually emitted.
    data = draft.model_dump()
    errors = validate_draft_rules(data)
    if errors:
        raise DraftValidationError(errors)

    data["schema_version"] = SCHEMA_VERSION
    data["consistency"]["character_references"] = _resolve_character_references(data)
    prompt = StructuredPrompt.model_validate(data)

    validate_structured_prompt_model(prompt)
    logger.info(
        "generated structured prompt: %d character(s), %d location(s), %d shot(s)",
        len(prompt.characters),
        len(prompt.locations),
        len(prompt.shots),
    )
    return prompt


def _resolve_character_references(data: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Map each characterIdMap key to its character, in map order."""
    by_id = {c["id"]: c for c in data["characters"]}
    id_map = data["consistency"]["character_id_map"]
    unresolved = [
        (key, character_id)
        for key, character_id in id_map.items()
        if character_id not in by_id
    ]
    if unresolved:
        key, character_id = unresolved[0]
        raise UnresolvedCharacterReference(key, character_id, unresolved)
    return {key: dict(by_id[character_id]) for key, character_id in id_map.items()}
