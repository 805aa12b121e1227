"""Messy idea text → Draft extraction.

Public entry point
------------------
    idea_to_draft(text, current) -> Draft

Runs every matcher in matchers.MATCHERS once over the text and merges the
contributions over a copy of ``current``:

- scalars are overwritten only when a matcher found evidence;
- collections are appended to, never replaced or reordered;
- a character or location whose name is already present (case-insensitive)
  is enriched in place instead of duplicated.

Pure: no I/O, no randomness, no clock.  New character and shot ids are
functions of the existing collections only.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from prompt_builder.drafting.matchers import (
    MATCHERS,
    CharacterCue,
    LocationCue,
    ShotCue,
    Target,
)
from prompt_builder.drafting.models import (
    Character,
    Draft,
    Location,
    Shot,
    allocate_character_id,
    allocate_shot_id,
)

logger = logging.getLogger(__name__)

# Placeholder length for a shot whose clause gives no explicit duration.
PLACEHOLDER_SHOT_DURATION = 3

_SCALAR_FIELDS = (
    (Target.TITLE, (), "title"),
    (Target.DURATION, (), "duration_seconds"),
    (Target.ASPECT_RATIO, (), "aspect_ratio"),
    (Target.FPS, (), "fps"),
    (Target.TONE, ("style",), "tone"),
    (Target.COLOR_PALETTE, ("style",), "color_palette"),
    (Target.CAMERA_BODY, ("cinematography",), "camera_body"),
    (Target.LENSES, ("cinematography",), "lenses"),
    (Target.MOVEMENT, ("cinematography",), "movement"),
    (Target.LIGHTING, ("cinematography",), "lighting"),
    (Target.COLOR_GRADE, ("cinematography",), "color_grade"),
    (Target.MUSIC, ("audio",), "music"),
    (Target.SOUND_DESIGN, ("audio",), "sound_design"),
    (Target.VOICEOVER, ("audio",), "voiceover"),
    (Target.SEED, ("consistency",), "seed"),
)


def run_matchers(text: str) -> Dict[Target, Any]:
    """Return one contribution per target; the first matcher with evidence wins."""
    found: Dict[Target, Any] = {}
    for matcher in MATCHERS:
        if matcher.target in found:
            continue
        value = matcher.match(text)
        if value is not None:
            found[matcher.target] = value
    return found


def idea_to_draft(text: str, current: Draft) -> Draft:
    """Merge everything inferable from *text* over a copy of *current*.

    Empty or whitespace-only text returns an equal copy of *current*.
    *current* itself is never modified.
    """
    if not text or not text.strip():
        return current.model_copy(deep=True)

    found = run_matchers(text)
    logger.debug("idea matchers hit %s", sorted(t.value for t in found))

    # Rebuild as a plain (mutable) Draft even when handed a ValidatedDraft.
    draft = Draft.model_validate(current.model_dump())

    for target, parents, field in _SCALAR_FIELDS:
        if target in found:
            owner: Any = draft
            for parent in parents:
                owner = getattr(owner, parent)
            setattr(owner, field, found[target])

    if Target.SUMMARY in found and not draft.summary.strip():
        draft.summary = found[Target.SUMMARY]

    for cue in found.get(Target.CHARACTERS, ()):
        _merge_character(draft.characters, cue)
    for cue in found.get(Target.LOCATIONS, ()):
        _merge_location(draft.locations, cue)
    for cue in found.get(Target.SHOTS, ()):
        _append_shot(draft.shots, cue)

    _append_unique(draft.style.inspirations, found.get(Target.INSPIRATIONS, ()))
    _append_unique(draft.constraints.avoid, found.get(Target.AVOID, ()))
    _append_unique(draft.negative_prompts, found.get(Target.NEGATIVE_PROMPTS, ()))
    return draft


# ── Merge helpers ─────────────────────────────────────────────────────────────


def _append_unique(items: List[str], new_items: Iterable[str]) -> None:
    seen = {i.strip().lower() for i in items}
    for item in new_items:
        item = item.strip()
        if item and item.lower() not in seen:
            items.append(item)
            seen.add(item.lower())


def _enrich(existing: str, parts: Iterable[str]) -> str:
    """Append each part not already mentioned in *existing*, comma-separated."""
    out = existing.strip()
    for part in parts:
        if part and part.lower() not in out.lower():
            out = f"{out}, {part}" if out else part
    return out


def _by_name(entities: List[Any], name: str) -> Optional[Any]:
    key = name.strip().lower()
    return next((e for e in entities if e.name.strip().lower() == key), None)


def _merge_character(characters: List[Character], cue: CharacterCue) -> None:
    description_parts = ([cue.role] if cue.role else []) + list(cue.appearance)
    existing = _by_name(characters, cue.name)
    if existing is not None:
        existing.description = _enrich(existing.description, description_parts)
        existing.wardrobe = _enrich(existing.wardrobe, cue.wardrobe)
        return
    characters.append(
        Character(
            id=allocate_character_id(characters),
            name=cue.name,
            description=_enrich("", description_parts),
            wardrobe=_enrich("", cue.wardrobe),
        )
    )


def _merge_location(locations: List[Location], cue: LocationCue) -> None:
    existing = _by_name(locations, cue.name)
    if existing is not None:
        existing.description = _enrich(existing.description, [cue.description])
        if cue.time_of_day:
            existing.time_of_day = cue.time_of_day
        return
    locations.append(
        Location(name=cue.name, description=cue.description, time_of_day=cue.time_of_day)
    )


def _append_shot(shots: List[Shot], cue: ShotCue) -> None:
    shots.append(
        Shot(
            id=allocate_shot_id(shots),
            duration=PLACEHOLDER_SHOT_DURATION if cue.duration is None else cue.duration,
            type=cue.type,
            movement=cue.movement,
            action=cue.action,
            notes=cue.notes,
        )
    )
