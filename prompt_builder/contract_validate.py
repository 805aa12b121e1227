import json

import jsonschema

from .schema_loader import load_schema
from .schemas.structured_prompt_v1 import canonical_json_bytes


def validate_structured_prompt(data: dict) -> None:
    """Validate a structured prompt dict against StructuredPrompt.v1.json.

    Raises jsonschema.ValidationError if non-conformant.
    """
    schema = load_schema("StructuredPrompt.v1.json")
    jsonschema.validate(data, schema)


def validate_structured_prompt_model(prompt) -> None:
    """Validate a StructuredPrompt model against the canonical contract.

    Projects the model to its wire form (camelCase keys, JSON types) first.

    Raises jsonschema.ValidationError if the projected artifact is non-conformant.
    """
    validate_structured_prompt(json.loads(canonical_json_bytes(prompt).decode("utf-8")))
