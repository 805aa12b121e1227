"""Errors surfaced to the host by validation, generation and draft edits."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class FieldError:
    """One validation failure: a dotted field path and a human-readable reason."""

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class DraftValidationError(ValueError):
    """Raised by parse_draft(); carries every violation, not just the first."""

    def __init__(self, errors: Sequence[FieldError]):
        self.errors: List[FieldError] = list(errors)
        super().__init__(
            f"draft failed validation with {len(self.errors)} error(s): "
            + "; ".join(str(e) for e in self.errors)
        )


class UnresolvedCharacterReference(LookupError):
    """consistency.characterIdMap points at a character id the draft lacks.

    ``key``/``character_id`` name the first offending entry in map order;
    ``unresolved`` lists every offending (key, character_id) pair.
    """

    def __init__(self, key: str, character_id: str, unresolved: Sequence[tuple] = ()):
        self.key = key
        self.character_id = character_id
        self.unresolved = list(unresolved) or [(key, character_id)]
        super().__init__(
            f"consistency.characterIdMap.{key} references unknown character id "
            f"'{character_id}'"
        )


class DraftEditError(ValueError):
    """An update could not be parsed, or addressed a character, shot, location
    or preset that does not exist."""
