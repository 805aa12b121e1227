"""generate_structured_prompt() tests.

Covers: ValidatedDraft-only input, characterIdMap resolution, the
UnresolvedCharacterReference failure, the rule re-check on drafts changed
after validation, seed echo, order preservation,
byte-identical determinism, and the default-draft round trip.
"""
from __future__ import annotations

import json

import pytest

from prompt_builder.contract_validate import validate_structured_prompt
from prompt_builder.drafting.errors import DraftValidationError, UnresolvedCharacterReference
from prompt_builder.drafting.generator import generate_structured_prompt
from prompt_builder.drafting.models import (
    Character,
    Draft,
    Shot,
    StructuredPrompt,
    default_prompt,
)
from prompt_builder.schemas.structured_prompt_v1 import dump_structured_prompt
from prompt_builder.validator import parse_draft


def _aya() -> Character:
    return Character(id="char_1", name="Aya", description="pink bob cut", wardrobe="leather jacket")


def _make_draft(**kwargs) -> Draft:
    d = default_prompt()
    d.characters.append(_aya())
    d.consistency.character_id_map = {"lead": "char_1"}
    for key, value in kwargs.items():
        setattr(d, key, value)
    return d


def _shot(sid: str, duration=3) -> Shot:
    return Shot(id=sid, duration=duration, type="WS", movement="static", action="", notes="")


# ── Input type ─────────────────────────────────────────────────────────────────


class TestRequiresValidatedDraft:
    def test_raw_draft_rejected(self):
        with pytest.raises(TypeError):
            generate_structured_prompt(_make_draft())

    def test_dict_rejected(self):
        with pytest.raises(TypeError):
            generate_structured_prompt(_make_draft().model_dump(by_alias=True))


class TestChangedAfterValidation:
    def test_duplicate_character_appended(self):
        validated = parse_draft(_make_draft())
        validated.characters.append(_aya())
        with pytest.raises(DraftValidationError) as exc_info:
            generate_structured_prompt(validated)
        assert [e.path for e in exc_info.value.errors] == ["characters[1].id"]

    def test_blank_inspiration_appended(self):
        validated = parse_draft(_make_draft())
        validated.style.inspirations.append("   ")
        with pytest.raises(DraftValidationError) as exc_info:
            generate_structured_prompt(validated)
        assert [e.path for e in exc_info.value.errors] == ["style.inspirations[0]"]

    def test_negative_shot_duration_set(self):
        validated = parse_draft(_make_draft(shots=[_shot("S1")]))
        validated.shots[0].duration = -2
        with pytest.raises(DraftValidationError):
            generate_structured_prompt(validated)


# ── Consistency ────────────────────────────────────────────────────────────────


class TestCharacterReferences:
    def test_lead_resolves_to_char_1(self):
        prompt = generate_structured_prompt(parse_draft(_make_draft()))
        ref = prompt.consistency.character_references["lead"]
        assert ref.id == "char_1"
        assert ref.name == "Aya"
        assert ref.description == "pink bob cut"
        assert ref.wardrobe == "leather jacket"
        assert prompt.consistency.character_id_map == {"lead": "char_1"}

    def test_wire_form_echoes_char_1(self):
        prompt = generate_structured_prompt(parse_draft(_make_draft()))
        raw = json.loads(dump_structured_prompt(prompt))
        assert raw["consistency"]["characterIdMap"] == {"lead": "char_1"}
        assert raw["consistency"]["characterReferences"]["lead"]["id"] == "char_1"

    def test_unknown_id_raises_naming_it(self):
        draft = _make_draft()
        draft.consistency.character_id_map = {"lead": "char_9"}
        validated = parse_draft(draft)
        with pytest.raises(UnresolvedCharacterReference) as exc_info:
            generate_structured_prompt(validated)
        assert exc_info.value.character_id == "char_9"
        assert exc_info.value.key == "lead"
        assert "char_9" in str(exc_info.value)

    def test_every_unresolved_entry_reported(self):
        draft = _make_draft()
        draft.consistency.character_id_map = {"lead": "char_9", "ok": "char_1", "foil": "char_7"}
        with pytest.raises(UnresolvedCharacterReference) as exc_info:
            generate_structured_prompt(parse_draft(draft))
        assert exc_info.value.unresolved == [("lead", "char_9"), ("foil", "char_7")]

    def test_same_character_under_two_keys(self):
        draft = _make_draft()
        draft.consistency.character_id_map = {"lead": "char_1", "hero": "char_1"}
        prompt = generate_structured_prompt(parse_draft(draft))
        assert list(prompt.consistency.character_references) == ["lead", "hero"]

    def test_seed_echoed_verbatim(self):
        draft = _make_draft()
        draft.consistency.seed = "  0042-aya "
        prompt = generate_structured_prompt(parse_draft(draft))
        assert prompt.consistency.seed == "  0042-aya "


# ── Shape ──────────────────────────────────────────────────────────────────────


class TestOutputShape:
    def test_order_preserved(self):
        draft = _make_draft(
            shots=[_shot("S3"), _shot("S1"), _shot("S2")],
            negative_prompts=["z", "a", "m"],
        )
        draft.style.inspirations = ["Akira", "Blade Runner"]
        draft.constraints.avoid = ["text", "gore"]
        prompt = generate_structured_prompt(parse_draft(draft))
        assert [s.id for s in prompt.shots] == ["S3", "S1", "S2"]
        assert prompt.negative_prompts == ["z", "a", "m"]
        assert prompt.style.inspirations == ["Akira", "Blade Runner"]
        assert prompt.constraints.avoid == ["text", "gore"]

    def test_every_draft_field_present(self):
        draft = _make_draft()
        prompt = generate_structured_prompt(parse_draft(draft))
        raw = prompt.model_dump(by_alias=True)
        for key, value in draft.model_dump(by_alias=True).items():
            if key == "consistency":
                continue
            assert raw[key] == value

    def test_schema_version_first(self):
        prompt = generate_structured_prompt(parse_draft(_make_draft()))
        assert list(prompt.model_dump(by_alias=True))[0] == "schemaVersion"
        assert prompt.schema_version == "1.0.0"

    def test_output_conforms_to_contract(self):
        prompt = generate_structured_prompt(parse_draft(_make_draft()))
        validate_structured_prompt(json.loads(dump_structured_prompt(prompt)))


class TestDeterminism:
    def test_byte_identical(self):
        validated = parse_draft(_make_draft(shots=[_shot("S1", 2.5)]))
        a = dump_structured_prompt(generate_structured_prompt(validated))
        b = dump_structured_prompt(generate_structured_prompt(validated))
        assert a == b

    def test_input_not_mutated(self):
        validated = parse_draft(_make_draft())
        before = validated.model_dump()
        generate_structured_prompt(validated)
        assert validated.model_dump() == before


class TestRoundTrip:
    def test_default_prompt_generates(self):
        prompt = generate_structured_prompt(parse_draft(default_prompt()))
        assert isinstance(prompt, StructuredPrompt)
        raw = prompt.model_dump(by_alias=True)
        for key in default_prompt().model_dump(by_alias=True):
            assert key in raw
        assert raw["characters"] == []
        assert raw["consistency"]["characterReferences"] == {}
        assert raw["durationSeconds"] == 30
