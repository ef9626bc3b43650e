"""Tests for structural validation of retouch prompts."""

from itertools import combinations

import pytest

from skin_retoucher.dto.retouch_prompt import RetouchPromptDraft
from skin_retoucher.services.prompting.base_protocol import BASE_RETOUCH_JSON
from skin_retoucher.services.prompting.validator import REQUIRED_FIELDS, validate_prompt


COMPLETE_CANDIDATE = {
    "task_type": "image_retouching",
    "style_profile": "Sculpted Glow",
    "retouching_steps": [],
    "global_style": {"aesthetic_goal": "natural", "prohibitions": "", "final_check": ""},
}

NON_EMPTY_SUBSETS = [
    subset
    for size in range(1, len(REQUIRED_FIELDS) + 1)
    for subset in combinations(REQUIRED_FIELDS, size)
]


class TestValidatePrompt:
    def test_accepts_complete_candidate(self):
        result = validate_prompt(COMPLETE_CANDIDATE)
        assert result.valid is True
        assert result.missing_fields == []

    def test_empty_object_reports_all_top_level_fields(self):
        result = validate_prompt({})
        assert result.valid is False
        assert result.missing_fields == [
            "task_type",
            "style_profile",
            "retouching_steps",
            "global_style",
        ]

    def test_non_array_steps_reported_as_missing(self):
        result = validate_prompt({
            "task_type": "x",
            "style_profile": "y",
            "retouching_steps": "not-an-array",
            "global_style": {"aesthetic_goal": "g"},
        })
        assert result.valid is False
        assert result.missing_fields == ["retouching_steps"]

    def test_reports_nested_aesthetic_goal_with_dotted_path(self):
        candidate = {**COMPLETE_CANDIDATE, "global_style": {"prohibitions": "none"}}
        result = validate_prompt(candidate)
        assert result.valid is False
        assert result.missing_fields == ["global_style.aesthetic_goal"]

    def test_non_object_global_style_skips_nested_check(self):
        candidate = {**COMPLETE_CANDIDATE, "global_style": "just text"}
        assert validate_prompt(candidate).valid is True

    def test_reports_top_level_and_nested_together(self):
        candidate = {"global_style": {}}
        result = validate_prompt(candidate)
        assert result.missing_fields == [
            "task_type",
            "style_profile",
            "retouching_steps",
            "global_style.aesthetic_goal",
        ]

    def test_none_values_count_as_missing(self):
        candidate = {**COMPLETE_CANDIDATE, "style_profile": None}
        assert validate_prompt(candidate).missing_fields == ["style_profile"]

    @pytest.mark.parametrize("subset", NON_EMPTY_SUBSETS, ids=lambda s: "+".join(s))
    def test_any_missing_subset_is_reported(self, subset):
        candidate = {k: v for k, v in COMPLETE_CANDIDATE.items() if k not in subset}
        result = validate_prompt(candidate)
        assert result.valid is False
        assert set(subset) <= set(result.missing_fields)

    @pytest.mark.parametrize("candidate", [None, 0, 3.5, "prompt", ["task_type"], True, object()])
    def test_non_object_input_has_exactly_four_missing(self, candidate):
        result = validate_prompt(candidate)
        assert result.valid is False
        assert result.missing_fields == list(REQUIRED_FIELDS)

    def test_accepts_models(self):
        assert validate_prompt(BASE_RETOUCH_JSON).valid is True

    def test_empty_draft_is_invalid(self):
        result = validate_prompt(RetouchPromptDraft())
        assert result.missing_fields == list(REQUIRED_FIELDS)
