"""Tests for the cinematography preset table."""
from __future__ import annotations

import dataclasses

import pytest

from prompt_builder.drafting.models import default_prompt
from prompt_builder.drafting.presets import PRESETS
from prompt_builder.drafting.updates import ApplyPreset, apply_update
from prompt_builder.validator import parse_draft


class TestPresetTable:
    def test_high_budget_registered_under_its_id(self):
        assert PRESETS["high_budget"].preset_id == "high_budget"

    def test_all_keys_match_preset_ids(self):
        for key, preset in PRESETS.items():
            assert key == preset.preset_id

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            PRESETS["high_budget"].fps = 30


class TestApplyingPresets:
    @pytest.mark.parametrize("preset_id", sorted(PRESETS))
    def test_result_validates(self, preset_id):
        parse_draft(apply_update(default_prompt(), ApplyPreset(preset_id=preset_id)))

    @pytest.mark.parametrize("preset_id", sorted(PRESETS))
    def test_applying_twice_is_a_no_op(self, preset_id):
        once = apply_update(default_prompt(), ApplyPreset(preset_id=preset_id))
        twice = apply_update(once, ApplyPreset(preset_id=preset_id))
        assert twice == once
