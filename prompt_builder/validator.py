"""Draft validator: parse a draft-shaped value into a ValidatedDraft.

Two passes run over the raw value and their errors are reported together:

1. structure: pydantic parse against the Draft model (missing fields, wrong
   primitive types);
2. rules: validate_draft_rules() over the raw mapping (non-negative numbers,
   W:H aspect ratio, unique non-empty character and shot ids, no blank list
   entries).

Neither pass mutates its input.  Shot durations are not required to add up
to durationSeconds; duration_warnings() reports that as advisory text only.
"""
from __future__ import annotations

import json
import logging
import math
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Union

from pydantic import BaseModel, ValidationError

from prompt_builder.drafting.errors import DraftValidationError, FieldError
from prompt_builder.drafting.models import Draft, ValidatedDraft

logger = logging.getLogger(__name__)

_ASPECT_RATIO_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*:\s*(\d+(?:\.\d+)?)\s*$")


# ── Structure ─────────────────────────────────────────────────────────────────


def _format_loc(loc: Sequence[Union[str, int]]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "<root>"


def _structural_errors(data: Any) -> List[FieldError]:
    try:
        Draft.model_validate(data)
        return []
    except ValidationError as exc:
        errors = []
        for e in exc.errors():
            if e["type"] == "missing":
                reason = "required field missing"
            else:
                reason = e["msg"].removeprefix("Value error, ")
            errors.append(FieldError(_format_loc(e["loc"]), reason))
        return errors


# ── Rules ─────────────────────────────────────────────────────────────────────


def _get(data: Mapping[str, Any], camel: str, snake: str) -> Any:
    return data[camel] if camel in data else data.get(snake)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_non_negative(path: str, value: Any, errors: List[FieldError]) -> None:
    if not _is_number(value):
        return  # type errors come from the structural pass
    if not math.isfinite(value):
        errors.append(FieldError(path, "must be a finite number"))
    elif value < 0:
        errors.append(FieldError(path, f"must be non-negative, got {value!r}"))


def _check_unique_ids(
    path: str, label: str, entries: Any, errors: List[FieldError]
) -> None:
    if not isinstance(entries, list):
        return
    first_seen: Dict[str, int] = {}
    for i, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            continue
        entry_id = entry.get("id")
        if not isinstance(entry_id, str):
            continue
        if not entry_id.strip():
            errors.append(FieldError(f"{path}[{i}].id", f"{label} id must not be empty"))
        elif entry_id in first_seen:
            errors.append(
                FieldError(
                    f"{path}[{i}].id",
                    f"duplicate {label} id {entry_id!r} (first used by {path}[{first_seen[entry_id]}])",
                )
            )
        else:
            first_seen[entry_id] = i


def _check_no_blank_entries(path: str, items: Any, errors: List[FieldError]) -> None:
    if not isinstance(items, list):
        return
    for i, item in enumerate(items):
        if isinstance(item, str) and not item.strip():
            errors.append(FieldError(f"{path}[{i}]", "must not be blank"))


def validate_draft_rules(data: Mapping[str, Any]) -> List[FieldError]:
    """Check draft invariants on a raw mapping (camelCase or snake_case keys).

    Returns a list of FieldErrors; empty list means every rule holds.  Values
    of the wrong type are skipped here and reported by the structural pass.
    Does NOT raise.
    """
    errors: List[FieldError] = []
    if not isinstance(data, Mapping):
        return errors

    _check_non_negative("durationSeconds", _get(data, "durationSeconds", "duration_seconds"), errors)
    _check_non_negative("fps", data.get("fps"), errors)

    aspect_ratio = _get(data, "aspectRatio", "aspect_ratio")
    if isinstance(aspect_ratio, str):
        m = _ASPECT_RATIO_RE.match(aspect_ratio)
        if not m or float(m.group(1)) <= 0 or float(m.group(2)) <= 0:
            errors.append(
                FieldError("aspectRatio", f"must have the form W:H (e.g. 16:9), got {aspect_ratio!r}")
            )

    _check_unique_ids("characters", "character", data.get("characters"), errors)

    shots = data.get("shots")
    _check_unique_ids("shots", "shot", shots, errors)
    if isinstance(shots, list):
        for i, shot in enumerate(shots):
            if isinstance(shot, Mapping):
                _check_non_negative(f"shots[{i}].duration", shot.get("duration"), errors)

    style = data.get("style")
    if isinstance(style, Mapping):
        _check_no_blank_entries("style.inspirations", style.get("inspirations"), errors)
    constraints = data.get("constraints")
    if isinstance(constraints, Mapping):
        _check_no_blank_entries("constraints.avoid", constraints.get("avoid"), errors)
    _check_no_blank_entries(
        "negativePrompts", _get(data, "negativePrompts", "negative_prompts"), errors
    )
    return errors


# ── Public API ────────────────────────────────────────────────────────────────


def _as_raw(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    return data


def validate_draft(data: Any) -> Union[ValidatedDraft, List[FieldError]]:
    """Parse *data* into a ValidatedDraft, or return every violation found.

    *data* may be a Draft, a ValidatedDraft, or a mapping loaded from JSON.
    Structural errors are listed before rule errors.
    """
    raw = _as_raw(data)
    errors = _structural_errors(raw) + validate_draft_rules(raw)
    if errors:
        logger.debug("draft validation found %d error(s)", len(errors))
        return errors
    return ValidatedDraft.model_validate(raw)


def parse_draft(data: Any) -> ValidatedDraft:
    """Like validate_draft() but raises DraftValidationError on failure."""
    result = validate_draft(data)
    if isinstance(result, list):
        raise DraftValidationError(result)
    return result


def load_draft_json(draft_path: Path) -> Any:
    """Read and decode *draft_path* without validating it.

    Raises:
        ValueError: if the file is missing or contains invalid JSON.
    """
    try:
        raw = draft_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ValueError(f"Draft file not found: {draft_path}") from exc

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {draft_path}: {exc}") from exc


def validate_draft_file(draft_path: Path) -> List[FieldError]:
    """Load JSON from *draft_path* and return its validation errors.

    Raises:
        ValueError: if the file is missing or contains invalid JSON.
    """
    result = validate_draft(load_draft_json(draft_path))
    return result if isinstance(result, list) else []


def duration_warnings(draft: Draft) -> List[str]:
    """Advisory: shot durations that do not add up to durationSeconds.

    Never an error; an empty shot list produces no warning.
    """
    if not draft.shots:
        return []
    total = round(sum(s.duration for s in draft.shots), 3)
    if math.isclose(total, draft.duration_seconds, abs_tol=1e-3):
        return []
    return [
        f"shot durations sum to {total:g}s but durationSeconds is {draft.duration_seconds:g}s"
    ]
