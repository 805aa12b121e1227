"""Typed draft edits.

Every edit the host can make is one pydantic model discriminated on ``op``;
parse_update() turns a JSON object into the right model and apply_update()
returns a NEW Draft.  The input draft is never mutated: only the
substructure an edit touches is rebuilt, every other part is shared with the
input.

Addressing
----------
- characters and shots: by their id (``characterId`` / ``shotId``)
- locations: by list index (locations carry no id)

Delimited-text list edits (inspirations, avoid, negative prompts) accept
either a list or a comma-separated string; entries are trimmed and blanks
dropped, so the rebuilt list never holds an empty entry.

Edits only check that the addressed entity exists.  Value rules (negative
durations, malformed aspect ratios, dangling characterIdMap ids) are the
validator's and the generator's to report.
"""
from __future__ import annotations

import json
import logging
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from prompt_builder.drafting.errors import DraftEditError
from prompt_builder.drafting.models import (
    Character,
    Draft,
    Location,
    Number,
    Shot,
    ValidatedDraft,
    allocate_character_id,
    allocate_shot_id,
    default_prompt,
)
from prompt_builder.drafting.presets import PRESETS

logger = logging.getLogger(__name__)

NEW_SHOT_DURATION = 3
NEW_SHOT_TYPE = "WS"
NEW_SHOT_MOVEMENT = "static"

DelimitedList = Union[StrictStr, List[StrictStr]]


def split_delimited(value: Union[str, List[str]]) -> List[str]:
    """Comma-separated text (or a list) → trimmed entries, blanks dropped."""
    items = value.split(",") if isinstance(value, str) else value
    return [item.strip() for item in items if item.strip()]


def _character_index(draft: Draft, character_id: str) -> int:
    for i, c in enumerate(draft.characters):
        if c.id == character_id:
            return i
    raise DraftEditError(f"no character with id {character_id!r}")


def _shot_index(draft: Draft, shot_id: str) -> int:
    for i, s in enumerate(draft.shots):
        if s.id == shot_id:
            return i
    raise DraftEditError(f"no shot with id {shot_id!r}")


def _check_location_index(draft: Draft, index: int) -> None:
    if not 0 <= index < len(draft.locations):
        raise DraftEditError(
            f"location index {index} out of range (draft has {len(draft.locations)})"
        )


def _replace_at(items: list, index: int, item) -> list:
    copy = list(items)
    copy[index] = item
    return copy


class _Edit(BaseModel):
    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    def apply(self, draft: Draft) -> Draft:  # pragma: no cover - overridden
        raise NotImplementedError


# ── Top-level scalars ─────────────────────────────────────────────────────────


class SetTitle(_Edit):
    op: Literal["set_title"] = "set_title"
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        return draft.model_copy(update={"title": self.value})


class SetSummary(_Edit):
    op: Literal["set_summary"] = "set_summary"
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        return draft.model_copy(update={"summary": self.value})


class SetDuration(_Edit):
    op: Literal["set_duration"] = "set_duration"
    value: Number

    def apply(self, draft: Draft) -> Draft:
        return draft.model_copy(update={"duration_seconds": self.value})


class SetAspectRatio(_Edit):
    op: Literal["set_aspect_ratio"] = "set_aspect_ratio"
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        return draft.model_copy(update={"aspect_ratio": self.value})


class SetFps(_Edit):
    op: Literal["set_fps"] = "set_fps"
    value: Number

    def apply(self, draft: Draft) -> Draft:
        return draft.model_copy(update={"fps": self.value})


# ── Characters ────────────────────────────────────────────────────────────────


class AddCharacter(_Edit):
    """Append a character under a freshly allocated ``char_<n>`` id."""

    op: Literal["add_character"] = "add_character"
    name: StrictStr = ""
    description: StrictStr = ""
    wardrobe: StrictStr = ""

    def apply(self, draft: Draft) -> Draft:
        character = Character(
            id=allocate_character_id(draft.characters),
            name=self.name,
            description=self.description,
            wardrobe=self.wardrobe,
        )
        return draft.model_copy(update={"characters": [*draft.characters, character]})


class RemoveCharacter(_Edit):
    """Drop a character.  Survivors keep their ids."""

    op: Literal["remove_character"] = "remove_character"
    character_id: StrictStr

    def apply(self, draft: Draft) -> Draft:
        index = _character_index(draft, self.character_id)
        characters = draft.characters[:index] + draft.characters[index + 1:]
        return draft.model_copy(update={"characters": characters})


class SetCharacterField(_Edit):
    op: Literal["set_character_field"] = "set_character_field"
    character_id: StrictStr
    field: Literal["name", "description", "wardrobe"]
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        index = _character_index(draft, self.character_id)
        character = draft.characters[index].model_copy(update={self.field: self.value})
        return draft.model_copy(
            update={"characters": _replace_at(draft.characters, index, character)}
        )


# ── Locations ─────────────────────────────────────────────────────────────────


class AddLocation(_Edit):
    op: Literal["add_location"] = "add_location"
    name: StrictStr = ""
    description: StrictStr = ""
    time_of_day: StrictStr = ""

    def apply(self, draft: Draft) -> Draft:
        location = Location(
            name=self.name, description=self.description, time_of_day=self.time_of_day
        )
        return draft.model_copy(update={"locations": [*draft.locations, location]})


class RemoveLocation(_Edit):
    op: Literal["remove_location"] = "remove_location"
    index: StrictInt

    def apply(self, draft: Draft) -> Draft:
        _check_location_index(draft, self.index)
        locations = draft.locations[:self.index] + draft.locations[self.index + 1:]
        return draft.model_copy(update={"locations": locations})


class SetLocationField(_Edit):
    op: Literal["set_location_field"] = "set_location_field"
    index: StrictInt
    field: Literal["name", "description", "time_of_day"]
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        _check_location_index(draft, self.index)
        location = draft.locations[self.index].model_copy(update={self.field: self.value})
        return draft.model_copy(
            update={"locations": _replace_at(draft.locations, self.index, location)}
        )


# ── Style / cinematography ────────────────────────────────────────────────────


class SetStyleField(_Edit):
    op: Literal["set_style_field"] = "set_style_field"
    field: Literal["tone", "color_palette"]
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        style = draft.style.model_copy(update={self.field: self.value})
        return draft.model_copy(update={"style": style})


class SetInspirations(_Edit):
    op: Literal["set_inspirations"] = "set_inspirations"
    value: DelimitedList

    def apply(self, draft: Draft) -> Draft:
        style = draft.style.model_copy(update={"inspirations": split_delimited(self.value)})
        return draft.model_copy(update={"style": style})


class SetCinematographyField(_Edit):
    op: Literal["set_cinematography_field"] = "set_cinematography_field"
    field: Literal["camera_body", "lenses", "movement", "lighting", "color_grade"]
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        cinematography = draft.cinematography.model_copy(update={self.field: self.value})
        return draft.model_copy(update={"cinematography": cinematography})


# ── Shots ─────────────────────────────────────────────────────────────────────


class AddShot(_Edit):
    """Append a shot under a fresh ``S<n>`` id (3 s static wide by default)."""

    op: Literal["add_shot"] = "add_shot"
    duration: Number = NEW_SHOT_DURATION
    type: StrictStr = NEW_SHOT_TYPE
    movement: StrictStr = NEW_SHOT_MOVEMENT
    action: StrictStr = ""
    notes: StrictStr = ""

    def apply(self, draft: Draft) -> Draft:
        shot = Shot(
            id=allocate_shot_id(draft.shots),
            duration=self.duration,
            type=self.type,
            movement=self.movement,
            action=self.action,
            notes=self.notes,
        )
        return draft.model_copy(update={"shots": [*draft.shots, shot]})


class RemoveShot(_Edit):
    op: Literal["remove_shot"] = "remove_shot"
    shot_id: StrictStr

    def apply(self, draft: Draft) -> Draft:
        index = _shot_index(draft, self.shot_id)
        return draft.model_copy(update={"shots": draft.shots[:index] + draft.shots[index + 1:]})


class SetShotField(_Edit):
    """Set a text field of a shot.  Renaming ``id`` onto another shot's id is refused."""

    op: Literal["set_shot_field"] = "set_shot_field"
    shot_id: StrictStr
    field: Literal["id", "type", "movement", "action", "notes"]
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        index = _shot_index(draft, self.shot_id)
        if self.field == "id" and self.value != self.shot_id:
            if any(s.id == self.value for s in draft.shots):
                raise DraftEditError(f"shot id {self.value!r} is already in use")
        shot = draft.shots[index].model_copy(update={self.field: self.value})
        return draft.model_copy(update={"shots": _replace_at(draft.shots, index, shot)})


class SetShotDuration(_Edit):
    op: Literal["set_shot_duration"] = "set_shot_duration"
    shot_id: StrictStr
    value: Number

    def apply(self, draft: Draft) -> Draft:
        index = _shot_index(draft, self.shot_id)
        shot = draft.shots[index].model_copy(update={"duration": self.value})
        return draft.model_copy(update={"shots": _replace_at(draft.shots, index, shot)})


class ReplaceShots(_Edit):
    """Replace the whole shot plan, e.g. after a reorder."""

    op: Literal["replace_shots"] = "replace_shots"
    shots: List[Shot]

    def apply(self, draft: Draft) -> Draft:
        seen = set()
        for shot in self.shots:
            if shot.id in seen:
                raise DraftEditError(f"duplicate shot id {shot.id!r} in replacement shot list")
            seen.add(shot.id)
        return draft.model_copy(update={"shots": list(self.shots)})


# ── Audio / constraints / consistency ─────────────────────────────────────────


class SetAudioField(_Edit):
    op: Literal["set_audio_field"] = "set_audio_field"
    field: Literal["music", "sound_design", "voiceover"]
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        audio = draft.audio.model_copy(update={self.field: self.value})
        return draft.model_copy(update={"audio": audio})


class SetAvoid(_Edit):
    op: Literal["set_avoid"] = "set_avoid"
    value: DelimitedList

    def apply(self, draft: Draft) -> Draft:
        constraints = draft.constraints.model_copy(update={"avoid": split_delimited(self.value)})
        return draft.model_copy(update={"constraints": constraints})


class SetNegativePrompts(_Edit):
    op: Literal["set_negative_prompts"] = "set_negative_prompts"
    value: DelimitedList

    def apply(self, draft: Draft) -> Draft:
        return draft.model_copy(update={"negative_prompts": split_delimited(self.value)})


class SetSeed(_Edit):
    op: Literal["set_seed"] = "set_seed"
    value: StrictStr

    def apply(self, draft: Draft) -> Draft:
        consistency = draft.consistency.model_copy(update={"seed": self.value})
        return draft.model_copy(update={"consistency": consistency})


class SetCharacterIdMap(_Edit):
    """Replace the role → character id map.  Dangling ids fail at generation."""

    op: Literal["set_character_id_map"] = "set_character_id_map"
    value: Dict[StrictStr, StrictStr]

    def apply(self, draft: Draft) -> Draft:
        consistency = draft.consistency.model_copy(update={"character_id_map": dict(self.value)})
        return draft.model_copy(update={"consistency": consistency})


# ── Whole-draft ───────────────────────────────────────────────────────────────


class ApplyPreset(_Edit):
    op: Literal["apply_preset"] = "apply_preset"
    preset_id: StrictStr

    def apply(self, draft: Draft) -> Draft:
        preset = PRESETS.get(self.preset_id)
        if preset is None:
            raise DraftEditError(
                f"unknown preset {self.preset_id!r} (known: {', '.join(sorted(PRESETS))})"
            )
        cinematography = draft.cinematography.model_copy(
            update={
                "camera_body": preset.camera_body,
                "lenses": preset.lenses,
                "movement": preset.movement,
                "lighting": preset.lighting,
                "color_grade": preset.color_grade,
            }
        )
        return draft.model_copy(
            update={
                "fps": preset.fps,
                "aspect_ratio": preset.aspect_ratio,
                "cinematography": cinematography,
            }
        )


class Reset(_Edit):
    """Back to default_prompt(), or to the supplied draft."""

    op: Literal["reset"] = "reset"
    draft: Optional[Draft] = None

    def apply(self, draft: Draft) -> Draft:
        if self.draft is None:
            return default_prompt()
        return self.draft.model_copy(deep=True)


Update = Annotated[
    Union[
        SetTitle,
        SetSummary,
        SetDuration,
        SetAspectRatio,
        SetFps,
        AddCharacter,
        RemoveCharacter,
        SetCharacterField,
        AddLocation,
        RemoveLocation,
        SetLocationField,
        SetStyleField,
        SetInspirations,
        SetCinematographyField,
        AddShot,
        RemoveShot,
        SetShotField,
        SetShotDuration,
        ReplaceShots,
        SetAudioField,
        SetAvoid,
        SetNegativePrompts,
        SetSeed,
        SetCharacterIdMap,
        ApplyPreset,
        Reset,
    ],
    Field(discriminator="op"),
]

_UPDATE_ADAPTER = TypeAdapter(Update)


def parse_update(data: Union[str, bytes, dict]) -> Update:
    """Parse one update from a JSON object (or its text).

    Raises:
        DraftEditError: unknown ``op``, missing or mistyped arguments, bad JSON.
    """
    try:
        if isinstance(data, (str, bytes)):
            data = json.loads(data)
        return _UPDATE_ADAPTER.validate_python(data)
    except json.JSONDecodeError as exc:
        raise DraftEditError(f"update is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}"
            for e in exc.errors()
        )
        raise DraftEditError(f"invalid update: {details}") from exc


def apply_update(draft: Draft, update: Update) -> Draft:
    """Return a new Draft with *update* applied; *draft* is left untouched.

    A ValidatedDraft input yields a plain Draft: an edited draft has to be
    validated again before generation.

    Raises:
        DraftEditError: the update addresses a missing character, shot,
                        location or preset.
    """
    if isinstance(draft, ValidatedDraft):
        draft = Draft.model_construct(
            **{name: getattr(draft, name) for name in Draft.model_fields}
        )
    result = update.apply(draft)
    logger.debug("applied update %s", update.op)
    return result
