"""Tests for layering style overrides on top of the base protocol."""

import pytest

from skin_retoucher.data.constants import EnhanceStyle, OutputFormat
from skin_retoucher.data.exceptions import IncompletePromptError, UnknownStyleError
from skin_retoucher.dto.retouch_prompt import (
    GlobalStyle,
    OutputSettings,
    RetouchPromptDraft,
    RetouchPromptMetadata,
    RetouchStep,
)
from skin_retoucher.services.prompting.base_protocol import BASE_RETOUCH_JSON, BASE_RETOUCH_STEPS
from skin_retoucher.services.prompting.merge import (
    compose_prompt,
    finalize_prompt,
    merge_prompts,
    merge_steps,
)
from skin_retoucher.services.prompting.styles import DEFAULT_STYLES
from skin_retoucher.services.prompting.validator import validate_prompt


BASE_NAMES = [step.step_name for step in BASE_RETOUCH_STEPS]


def _step(name, operation="op", target_area="face", details="details", intensity=None):
    return RetouchStep(
        step_name=name,
        target_area=target_area,
        operation=operation,
        details=details,
        intensity=intensity,
    )


THREE_NEW_STEPS = RetouchPromptDraft(
    style_profile="Test Style",
    retouching_steps=(
        _step("Extreme-Highlight"),
        _step("Extreme-Contour"),
        _step("Glass-Skin"),
    ),
)


class TestMergeSteps:
    def test_base_order_kept_and_new_steps_appended(self):
        merged = merge_steps((_step("a"), _step("b")), (_step("c"), _step("d")))
        assert [s.step_name for s in merged] == ["a", "b", "c", "d"]

    def test_override_keeps_original_position(self):
        merged = merge_steps(
            (_step("a"), _step("b"), _step("c")),
            (_step("d"), _step("b", operation="style-op")),
        )
        assert [s.step_name for s in merged] == ["a", "b", "c", "d"]
        assert merged[1].operation == "style-op"

    def test_override_replaces_whole_step(self):
        base = (_step("a", operation="base-op", intensity=0.2, details="base"),)
        merged = merge_steps(base, (_step("a", operation="style-op", details="style"),))
        assert merged[0].intensity is None
        assert merged[0].details == "style"

    def test_none_when_neither_side_has_steps(self):
        assert merge_steps(None, None) is None

    def test_one_sided(self):
        assert merge_steps(None, (_step("x"),)) == (_step("x"),)
        assert merge_steps((_step("x"),), None) == (_step("x"),)

    def test_duplicate_names_within_one_side_collapse(self):
        merged = merge_steps((_step("a", details="first"), _step("a", details="second")), None)
        assert len(merged) == 1
        assert merged[0].details == "second"


class TestMergePrompts:
    def test_base_plus_three_new_steps_yields_twelve(self):
        merged = merge_prompts(BASE_RETOUCH_JSON, THREE_NEW_STEPS)
        names = [s.step_name for s in merged.retouching_steps]
        assert len(names) == 12
        assert set(BASE_NAMES) <= set(names)
        assert names[:9] == BASE_NAMES
        assert validate_prompt(merged).valid is True

    def test_style_scalars_win(self):
        merged = merge_prompts(BASE_RETOUCH_JSON, THREE_NEW_STEPS)
        assert merged.style_profile == "Test Style"
        assert merged.task_type == "image_retouching"

    def test_missing_style_fields_fall_back_to_base(self):
        merged = merge_prompts(BASE_RETOUCH_JSON, THREE_NEW_STEPS)
        assert merged.global_style == BASE_RETOUCH_JSON.global_style
        assert merged.output_settings == BASE_RETOUCH_JSON.output_settings
        assert merged.metadata == BASE_RETOUCH_JSON.metadata
        assert merged.input_image_id == BASE_RETOUCH_JSON.input_image_id

    def test_global_style_replaced_wholesale(self):
        style_global = GlobalStyle(aesthetic_goal="glam", prohibitions="", final_check="")
        merged = merge_prompts(BASE_RETOUCH_JSON, RetouchPromptDraft(global_style=style_global))
        assert merged.global_style == style_global
        assert merged.global_style.prohibitions == ""

    def test_output_settings_replaced_wholesale(self):
        settings = OutputSettings(format=OutputFormat.PNG)
        merged = merge_prompts(BASE_RETOUCH_JSON, RetouchPromptDraft(output_settings=settings))
        assert merged.output_settings == settings

    def test_none_inputs_are_empty(self):
        assert merge_prompts(None, None) == RetouchPromptDraft()
        assert merge_prompts(BASE_RETOUCH_JSON, None) == BASE_RETOUCH_JSON
        assert merge_prompts(None, BASE_RETOUCH_JSON) == BASE_RETOUCH_JSON

    def test_partial_base_yields_incomplete_draft(self):
        merged = merge_prompts(RetouchPromptDraft(style_profile="only"), None)
        result = validate_prompt(merged)
        assert result.valid is False
        assert "retouching_steps" in result.missing_fields

    @pytest.mark.parametrize("template", DEFAULT_STYLES, ids=lambda t: t.id.value)
    def test_every_registered_style_merges_to_valid_prompt(self, template):
        merged = merge_prompts(BASE_RETOUCH_JSON, template.prompt_json)
        assert validate_prompt(merged).valid is True

    @pytest.mark.parametrize("template", DEFAULT_STYLES, ids=lambda t: t.id.value)
    def test_every_registered_style_keeps_base_steps(self, template):
        merged = merge_prompts(BASE_RETOUCH_JSON, template.prompt_json)
        names = [s.step_name for s in merged.retouching_steps]
        assert names[:9] == BASE_NAMES
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("template", DEFAULT_STYLES, ids=lambda t: t.id.value)
    def test_shared_step_names_take_style_fields(self, template):
        merged = merge_prompts(BASE_RETOUCH_JSON, template.prompt_json)
        by_name = {s.step_name: s for s in merged.retouching_steps}
        for style_step in template.prompt_json.retouching_steps:
            merged_step = by_name[style_step.step_name]
            assert merged_step.operation == style_step.operation
            assert merged_step.target_area == style_step.target_area
            assert merged_step.details == style_step.details


class TestFinalizePrompt:
    def test_complete_draft(self):
        prompt = finalize_prompt(BASE_RETOUCH_JSON)
        assert prompt.step_names == BASE_NAMES
        assert prompt.metadata == BASE_RETOUCH_JSON.metadata

    def test_incomplete_draft_raises_with_missing_fields(self):
        with pytest.raises(IncompletePromptError) as exc_info:
            finalize_prompt(RetouchPromptDraft(task_type="image_retouching"))
        assert exc_info.value.missing_fields == ["style_profile", "retouching_steps", "global_style"]


class TestComposePrompt:
    def test_style_prompt(self, library):
        prompt = compose_prompt(library, EnhanceStyle.ULTRA_GLAM, input_image_id="upload-42")
        assert prompt.style_profile == "Ultra Glam"
        assert prompt.input_image_id == "upload-42"
        assert "Extreme-Highlight" in prompt.step_names
        assert prompt.global_style.aesthetic_goal.startswith("ULTRA GLAM")
        assert prompt.output_settings.comparison is False

    def test_accepts_plain_string_ids(self, library):
        prompt = compose_prompt(library, "Dark Skin Glow")
        assert prompt.style_profile == "Dark Skin Glow"

    def test_unknown_style_falls_back_to_default(self, library):
        prompt = compose_prompt(library, "Vaporwave")
        assert prompt.style_profile == library.styles.default.prompt_json.style_profile

    def test_hidden_style_falls_back_to_default(self, library):
        prompt = compose_prompt(library, EnhanceStyle.NATURAL)
        assert prompt.style_profile == "Sculpted Glow"

    def test_unknown_style_raises_in_strict_mode(self, strict_library):
        with pytest.raises(UnknownStyleError):
            compose_prompt(strict_library, "Vaporwave")

    def test_custom_style_uses_base_protocol(self, library):
        prompt = compose_prompt(library, EnhanceStyle.CUSTOM)
        assert prompt.style_profile == "Custom Edit"
        assert prompt.step_names == BASE_NAMES

    def test_custom_style_is_known_in_strict_mode(self, strict_library):
        assert compose_prompt(strict_library, EnhanceStyle.CUSTOM).style_profile == "Custom Edit"

    def test_incomplete_base_raises(self, library):
        broken = library.model_copy(update={"base_protocol": RetouchPromptDraft()})
        with pytest.raises(IncompletePromptError):
            compose_prompt(broken, EnhanceStyle.SOFT)

    def test_style_metadata_replaces_base(self, library):
        prompt = compose_prompt(library, EnhanceStyle.SOFT)
        assert prompt.metadata == RetouchPromptMetadata(
            original_label="Soft Beauty",
            description="Fashion look. Smoother transitions, slight glow, flawless skin.",
        )
