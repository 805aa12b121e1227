"""Integration test: generated prompts validate against the shipped JSON Schema."""
from __future__ import annotations

import json

import jsonschema
import pytest

from prompt_builder.contract_validate import validate_structured_prompt
from prompt_builder.drafting.extractor import idea_to_draft
from prompt_builder.drafting.generator import generate_structured_prompt
from prompt_builder.drafting.models import SCHEMA_VERSION, default_prompt
from prompt_builder.schema_loader import load_schema
from prompt_builder.schemas.structured_prompt_v1 import dump_structured_prompt
from prompt_builder.validator import parse_draft

_IDEA = (
    "gritty neo-noir in rainy Tokyo at night, 30s, slow push-ins, 50mm and 85mm, "
    "deep shadows, protagonist Aya (pink bob cut, leather jacket), antagonist in "
    "chrome mask, neon reflections, opening wide establishing then close-ups, "
    "synthwave score, avoid extra hands"
)


def _generated() -> dict:
    draft = idea_to_draft(_IDEA, default_prompt())
    return json.loads(dump_structured_prompt(generate_structured_prompt(parse_draft(draft))))


def test_schema_ships_with_package() -> None:
    schema = load_schema("StructuredPrompt.v1.json")
    assert schema["title"] == "StructuredPrompt"


def test_missing_schema_raises() -> None:
    with pytest.raises(FileNotFoundError):
        load_schema("Nope.v1.json")


def test_extracted_idea_generates_conformant_prompt() -> None:
    validate_structured_prompt(_generated())


def test_extra_top_level_key_rejected() -> None:
    data = _generated()
    data["producer"] = "someone"
    with pytest.raises(jsonschema.ValidationError):
        validate_structured_prompt(data)


def test_negative_shot_duration_rejected() -> None:
    data = _generated()
    data["shots"][0]["duration"] = -1
    with pytest.raises(jsonschema.ValidationError):
        validate_structured_prompt(data)


def test_blank_negative_prompt_rejected() -> None:
    data = _generated()
    data["negativePrompts"].append("   ")
    with pytest.raises(jsonschema.ValidationError):
        validate_structured_prompt(data)


def test_missing_character_reference_field_rejected() -> None:
    data = _generated()
    data["consistency"]["characterReferences"] = {"lead": {"id": "char_1"}}
    with pytest.raises(jsonschema.ValidationError):
        validate_structured_prompt(data)


def test_wrong_schema_version_rejected() -> None:
    data = _generated()
    data["schemaVersion"] = "2.0.0"
    with pytest.raises(jsonschema.ValidationError):
        validate_structured_prompt(data)


def test_schema_version_has_one_source() -> None:
    schema = load_schema("StructuredPrompt.v1.json")
    assert schema["properties"]["schemaVersion"]["const"] == SCHEMA_VERSION
    assert _generated()["schemaVersion"] == SCHEMA_VERSION
