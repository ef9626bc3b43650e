"""Tests for the free-text prompt path."""

import pytest

from skin_retoucher.data.constants import EnhanceStyle
from skin_retoucher.data.exceptions import UnknownStyleError
from skin_retoucher.services.prompting.guardrail import GUARDRAIL_JSON, SOURCE_ADHERENCE_GUARDRAIL
from skin_retoucher.services.prompting.styles import STYLE_SCULPTED_GLOW, STYLE_ULTRA_GLAM
from skin_retoucher.services.prompting.text_builder import (
    FINAL_SUFFIX,
    GUARDRAIL_SEPARATOR,
    RE_ENHANCE_INSTRUCTION,
    build_background_prompt,
    build_prompt,
    build_re_enhance_prompt,
)


ALL_STYLES = list(EnhanceStyle) + ["Unknown Style"]
CUSTOM_TEXTS = [None, "", "Make the skin glow", 'Quote " and {braces}']


class TestBuildPrompt:
    def test_registered_style(self, library):
        prompt = build_prompt(library, EnhanceStyle.ULTRA_GLAM)
        assert prompt == (
            SOURCE_ADHERENCE_GUARDRAIL + GUARDRAIL_SEPARATOR + STYLE_ULTRA_GLAM.prompt + FINAL_SUFFIX
        )

    def test_additional_instruction_follows_style_prompt(self, library):
        prompt = build_prompt(library, EnhanceStyle.ULTRA_GLAM, "Keep freckles")
        expected_body = STYLE_ULTRA_GLAM.prompt + " \nAdditional Instruction: Keep freckles"
        assert prompt == SOURCE_ADHERENCE_GUARDRAIL + "\n\n" + expected_body + FINAL_SUFFIX

    def test_custom_edit_with_text(self, library):
        prompt = build_prompt(library, EnhanceStyle.CUSTOM, "Remove the tattoo")
        assert prompt.startswith(SOURCE_ADHERENCE_GUARDRAIL + "\n\n")
        assert "Retouch this image based on the following instruction: Remove the tattoo." in prompt
        assert "(4K/Ultra HD quality)." in prompt
        assert STYLE_SCULPTED_GLOW.prompt not in prompt
        assert prompt.endswith(FINAL_SUFFIX)

    @pytest.mark.parametrize("custom_text", [None, ""])
    def test_custom_edit_without_text_uses_default_style(self, library, custom_text):
        prompt = build_prompt(library, EnhanceStyle.CUSTOM, custom_text)
        assert prompt == (
            SOURCE_ADHERENCE_GUARDRAIL + GUARDRAIL_SEPARATOR + STYLE_SCULPTED_GLOW.prompt + FINAL_SUFFIX
        )

    def test_custom_edit_without_text_works_in_strict_mode(self, strict_library):
        prompt = build_prompt(strict_library, EnhanceStyle.CUSTOM, "")
        assert STYLE_SCULPTED_GLOW.prompt in prompt

    def test_unknown_style_falls_back_to_first_registered(self, library):
        assert build_prompt(library, "Vaporwave") == build_prompt(library, EnhanceStyle.SCULPTED)

    def test_unknown_style_raises_in_strict_mode(self, strict_library):
        with pytest.raises(UnknownStyleError):
            build_prompt(strict_library, "Vaporwave")

    @pytest.mark.parametrize("style", ALL_STYLES)
    @pytest.mark.parametrize("custom_text", CUSTOM_TEXTS)
    def test_guardrail_always_first(self, library, style, custom_text):
        prompt = build_prompt(library, style, custom_text)
        assert prompt.index(SOURCE_ADHERENCE_GUARDRAIL) == 0
        if custom_text:
            assert prompt.find(custom_text, len(SOURCE_ADHERENCE_GUARDRAIL)) > len(SOURCE_ADHERENCE_GUARDRAIL)

    @pytest.mark.parametrize("style", ALL_STYLES)
    def test_suffix_always_last(self, library, style):
        assert build_prompt(library, style, "extra").endswith(FINAL_SUFFIX)


class TestReEnhancePrompt:
    def test_uses_default_style_with_intensive_instruction(self, library):
        prompt = build_re_enhance_prompt(library)
        assert prompt.startswith(SOURCE_ADHERENCE_GUARDRAIL)
        assert STYLE_SCULPTED_GLOW.prompt in prompt
        assert "Additional Instruction: " + RE_ENHANCE_INSTRUCTION in prompt
        assert prompt.count(SOURCE_ADHERENCE_GUARDRAIL) == 1


class TestBackgroundPrompt:
    def test_renders_guardrail_policy(self):
        prompt = build_background_prompt(GUARDRAIL_JSON)
        assert prompt.startswith("BACKGROUND REPLACEMENT TASK")
        assert GUARDRAIL_JSON.protocol in prompt
        assert GUARDRAIL_JSON.identity_rule in prompt
        for prohibition in GUARDRAIL_JSON.absolute_prohibitions:
            assert f"- {prohibition}\n" in prompt

    def test_sections_in_order(self):
        prompt = build_background_prompt(GUARDRAIL_JSON)
        positions = [
            prompt.index(header)
            for header in (
                "=== GUARDRAIL PROTOCOL ===",
                "=== ABSOLUTE PROHIBITIONS ===",
                "=== IDENTITY RULE ===",
                "=== INPUT IMAGES ===",
            )
        ]
        assert positions == sorted(positions)
