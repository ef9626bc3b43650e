# skin_retoucher/services/prompting/library.py
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import orjson
import structlog
from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, model_validator

from skin_retoucher.data.constants import EnhanceStyle
from skin_retoucher.data.exceptions import PromptLibraryError, UnknownStyleError
from skin_retoucher.dto.guardrail import GuardrailPolicy, SystemInstruction
from skin_retoucher.dto.retouch_prompt import RetouchPromptDraft
from skin_retoucher.dto.style_template import StyleTemplate

from .base_protocol import BASE_RETOUCH_JSON
from .guardrail import GUARDRAIL_JSON, SOURCE_ADHERENCE_GUARDRAIL, SYSTEM_INSTRUCTION, SYSTEM_INSTRUCTION_JSON
from .styles import DEFAULT_STYLES

logger = structlog.get_logger(__name__)

LIBRARY_VERSION = "1"


def _coerce_style(style: EnhanceStyle | str) -> EnhanceStyle | None:
    try:
        return EnhanceStyle(style)
    except ValueError:
        return None


class StyleRegistry(RootModel[tuple[StyleTemplate, ...]]):
    """
    Style templates in catalog order. The first one is the default and the
    fallback for unrecognized ids.
    """
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_catalog(self) -> StyleRegistry:
        if not self.root:
            raise ValueError("A style registry needs at least one style.")
        ids = [style.id for style in self.root]
        if len(ids) != len(set(ids)):
            raise ValueError("Style ids must be unique.")
        if EnhanceStyle.CUSTOM in ids:
            raise ValueError("The custom edit style cannot have a template.")
        return self

    def __iter__(self) -> Iterator[StyleTemplate]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    @property
    def default(self) -> StyleTemplate:
        return self.root[0]

    @property
    def ids(self) -> list[EnhanceStyle]:
        return [style.id for style in self.root]

    def get(self, style: EnhanceStyle | str) -> StyleTemplate | None:
        style_id = _coerce_style(style)
        for template in self.root:
            if template.id == style_id:
                return template
        return None

    def resolve(self, style: EnhanceStyle | str, *, strict: bool = False) -> StyleTemplate:
        """
        Returns the template for `style`.

        Unknown ids (including hidden styles and the custom sentinel) fall back
        to the default style, unless `strict` is set, in which case
        UnknownStyleError is raised.
        """
        template = self.get(style)
        if template is not None:
            return template
        if strict:
            raise UnknownStyleError(str(style))
        logger.warning(
            "Style not in catalog, falling back to the default style.",
            style=str(style),
            fallback=self.default.id.value,
        )
        return self.default


class PromptLibrary(BaseModel):
    """
    Read-only bundle of every template the prompt builders need.

    Built once per process and passed into the merge engine and the text
    builders. Can be exported to and loaded from a versioned JSON asset.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = LIBRARY_VERSION
    base_protocol: RetouchPromptDraft
    guardrail_text: str
    guardrail: GuardrailPolicy
    system_instruction_text: str
    system_instruction: SystemInstruction
    styles: StyleRegistry

    strict_style_lookup: bool = Field(default=False, exclude=True)

    def resolve_style(self, style: EnhanceStyle | str) -> StyleTemplate:
        return self.styles.resolve(style, strict=self.strict_style_lookup)

    def to_json(self) -> str:
        return orjson.dumps(
            self.model_dump(mode="json", exclude_none=True),
            option=orjson.OPT_INDENT_2,
        ).decode()

    @classmethod
    def from_json(cls, data: str | bytes, *, strict_style_lookup: bool = False) -> PromptLibrary:
        try:
            payload = orjson.loads(data)
            if not isinstance(payload, dict):
                raise PromptLibraryError("Prompt library JSON must be an object.")
            payload["strict_style_lookup"] = strict_style_lookup
            return cls.model_validate(payload)
        except (orjson.JSONDecodeError, ValidationError) as e:
            raise PromptLibraryError(f"Invalid prompt library: {e}") from e

    @classmethod
    def from_json_file(cls, path: Path, *, strict_style_lookup: bool = False) -> PromptLibrary:
        log = logger.bind(path=str(path))
        try:
            data = path.read_bytes()
        except OSError as e:
            log.error("Could not read prompt library file.")
            raise PromptLibraryError(f"Cannot read prompt library at {path}: {e}") from e

        library = cls.from_json(data, strict_style_lookup=strict_style_lookup)
        log.info("Loaded prompt library.", version=library.version, styles=len(library.styles))
        return library


def build_default_library(*, strict_style_lookup: bool = False) -> PromptLibrary:
    """Assembles the library from the compiled-in templates."""
    return PromptLibrary(
        base_protocol=BASE_RETOUCH_JSON,
        guardrail_text=SOURCE_ADHERENCE_GUARDRAIL,
        guardrail=GUARDRAIL_JSON,
        system_instruction_text=SYSTEM_INSTRUCTION,
        system_instruction=SYSTEM_INSTRUCTION_JSON,
        styles=StyleRegistry(DEFAULT_STYLES),
        strict_style_lookup=strict_style_lookup,
    )
