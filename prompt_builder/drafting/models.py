"""Draft and StructuredPrompt data models: the canonical prompt contract.

Field names are snake_case in Python and camelCase on the wire
(alias_generator=to_camel); populate_by_name=True lets callers use either.
Every field is required so an externally loaded draft is always structurally
complete; default_prompt() is the zero state.  extra="ignore" drops unknown
keys instead of rejecting them.

Strict scalar types: numeric strings and booleans are type errors rather than
being coerced, so the validator can report them.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, Iterable, List, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, StrictStr, model_validator
from pydantic.alias_generators import to_camel

from prompt_builder.drafting.errors import DraftValidationError

SCHEMA_VERSION = "1.0.0"

DEFAULT_DURATION_SECONDS = 30
DEFAULT_FPS = 24
DEFAULT_ASPECT_RATIO = "16:9"


def _require_number(value: Any) -> Any:
    # bool is an int subclass; "30" would otherwise be coerced.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a number")
    return value


Number = Annotated[Union[int, float], BeforeValidator(_require_number)]

_MODEL_CONFIG = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class Character(BaseModel):
    """A recurring character.  ``id`` is stable for the character's lifetime."""

    model_config = _MODEL_CONFIG

    id: StrictStr
    name: StrictStr
    description: StrictStr
    wardrobe: StrictStr


class Location(BaseModel):
    model_config = _MODEL_CONFIG

    name: StrictStr
    description: StrictStr
    time_of_day: StrictStr


class Style(BaseModel):
    model_config = _MODEL_CONFIG

    tone: StrictStr
    color_palette: StrictStr
    inspirations: List[StrictStr]


class Cinematography(BaseModel):
    model_config = _MODEL_CONFIG

    camera_body: StrictStr
    lenses: StrictStr
    movement: StrictStr
    lighting: StrictStr
    color_grade: StrictStr


class Shot(BaseModel):
    """One beat of the shot plan.  List order is playback order."""

    model_config = _MODEL_CONFIG

    id: StrictStr
    duration: Number
    type: StrictStr
    movement: StrictStr
    action: StrictStr
    notes: StrictStr


class Audio(BaseModel):
    model_config = _MODEL_CONFIG

    music: StrictStr
    sound_design: StrictStr
    voiceover: StrictStr


class Constraints(BaseModel):
    model_config = _MODEL_CONFIG

    avoid: List[StrictStr]


class Consistency(BaseModel):
    """Seed and role → character id map reused across generation runs."""

    model_config = _MODEL_CONFIG

    seed: StrictStr
    character_id_map: Dict[StrictStr, StrictStr]


class Draft(BaseModel):
    """The working prompt.  Mutated by updates or replaced by extraction."""

    model_config = _MODEL_CONFIG

    title: StrictStr
    duration_seconds: Number
    aspect_ratio: StrictStr
    fps: Number
    summary: StrictStr
    characters: List[Character]
    locations: List[Location]
    style: Style
    cinematography: Cinematography
    shots: List[Shot]
    audio: Audio
    constraints: Constraints
    negative_prompts: List[StrictStr]
    consistency: Consistency


class ValidatedDraft(Draft):
    """A Draft that passed validator.parse_draft().

    Only the validator constructs these; generate_structured_prompt() accepts
    nothing else.  Constructing one directly still runs the draft rules, so
    ``ValidatedDraft.model_validate`` cannot skip them.  Frozen at the top
    level; nested lists stay mutable, which is why the generator re-checks
    the rules on its own snapshot.
    """

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_draft_rules(self) -> "ValidatedDraft":
        # Local import: validator imports this module.
        from prompt_builder.validator import validate_draft_rules  # noqa: PLC0415

        errors = validate_draft_rules(self.model_dump(by_alias=True))
        if errors:
            raise DraftValidationError(errors)
        return self


# ── Structured output ─────────────────────────────────────────────────────────


class StructuredConsistency(BaseModel):
    model_config = _MODEL_CONFIG

    seed: StrictStr
    character_id_map: Dict[StrictStr, StrictStr]
    character_references: Dict[StrictStr, Character]


class StructuredPrompt(BaseModel):
    """Generator output handed to the video-generation consumer.

    Mirrors Draft field for field; ``consistency`` additionally carries the
    resolved character for every character_id_map key.
    """

    model_config = _MODEL_CONFIG

    schema_version: StrictStr = SCHEMA_VERSION
    title: StrictStr
    duration_seconds: Number
    aspect_ratio: StrictStr
    fps: Number
    summary: StrictStr
    characters: List[Character]
    locations: List[Location]
    style: Style
    cinematography: Cinematography
    shots: List[Shot]
    audio: Audio
    constraints: Constraints
    negative_prompts: List[StrictStr]
    consistency: StructuredConsistency


# ── Factories ─────────────────────────────────────────────────────────────────


def default_prompt() -> Draft:
    """Return a fresh zero-state Draft.  No shared state between calls."""
    return Draft(
        title="",
        duration_seconds=DEFAULT_DURATION_SECONDS,
        aspect_ratio=DEFAULT_ASPECT_RATIO,
        fps=DEFAULT_FPS,
        summary="",
        characters=[],
        locations=[],
        style=Style(tone="", color_palette="", inspirations=[]),
        cinematography=Cinematography(
            camera_body="", lenses="", movement="", lighting="", color_grade=""
        ),
        shots=[],
        audio=Audio(music="", sound_design="", voiceover=""),
        constraints=Constraints(avoid=[]),
        negative_prompts=[],
        consistency=Consistency(seed="", character_id_map={}),
    )


def _next_free_id(prefix: str, taken: Iterable[str], count: int) -> str:
    used = set(taken)
    n = count + 1
    while f"{prefix}{n}" in used:
        n += 1
    return f"{prefix}{n}"


def allocate_character_id(characters: List[Character]) -> str:
    """Next stable character id: ``char_<count + 1>``, skipping ids in use.

    Ids are never derived from position, so after a removal the plain count
    could point at a survivor's id; the skip keeps ids unique.
    """
    return _next_free_id("char_", (c.id for c in characters), len(characters))


def allocate_shot_id(shots: List[Shot]) -> str:
    """Next shot id: ``S<count + 1>``, skipping ids in use."""
    return _next_free_id("S", (s.id for s in shots), len(shots))
