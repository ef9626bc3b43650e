# skin_retoucher/services/clients/gemini_request.py
from __future__ import annotations

import base64
import binascii
import re

import structlog
from pydantic import BaseModel
from google.genai import types
from google.genai.types import Modality

from skin_retoucher.data.constants import DEFAULT_IMAGE_MIME, DEFAULT_INPUT_IMAGE_ID, EnhanceStyle, ImageSize
from skin_retoucher.data.exceptions import InvalidImageDataError
from skin_retoucher.data.settings import settings
from skin_retoucher.services.prompting.formatter import format_prompt
from skin_retoucher.services.prompting.library import PromptLibrary
from skin_retoucher.services.prompting.merge import compose_prompt
from skin_retoucher.services.prompting.text_builder import (
    build_background_prompt,
    build_prompt,
    build_re_enhance_prompt,
)

logger = structlog.get_logger(__name__)

_DATA_URL_PREFIX = re.compile(r"^data:(image/[a-zA-Z+]+);base64,")

# Close-up skin photos trip the default filters, so every category is opened.
_SAFETY_CATEGORIES = (
    types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
    types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
)


class ImagePayload(BaseModel):
    data: bytes
    mime_type: str = DEFAULT_IMAGE_MIME


class RetouchRequest(BaseModel):
    """Everything needed for one `generate_content` call, minus the client."""
    model: str
    contents: list[types.Part]
    config: types.GenerateContentConfig


def parse_data_url(image: str) -> ImagePayload:
    """
    Decodes a base64 image, with or without a `data:image/...;base64,` prefix.
    Images without a prefix are assumed to be JPEG.

    Raises:
        InvalidImageDataError: the payload is not valid base64 or is empty.
    """
    match = _DATA_URL_PREFIX.match(image)
    mime_type = match.group(1) if match else DEFAULT_IMAGE_MIME
    encoded = image[match.end():] if match else image

    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageDataError("Image payload is not valid base64.") from e
    if not data:
        raise InvalidImageDataError("Image payload is empty.")
    return ImagePayload(data=data, mime_type=mime_type)


def _safety_settings() -> list[types.SafetySetting]:
    return [
        types.SafetySetting(category=category, threshold=types.HarmBlockThreshold.BLOCK_NONE)
        for category in _SAFETY_CATEGORIES
    ]


def _generation_config(
    image_size: ImageSize | None, system_instruction: str | None = None
) -> types.GenerateContentConfig:
    size = image_size or settings.gemini.image_size
    return types.GenerateContentConfig(
        system_instruction=system_instruction,
        safety_settings=_safety_settings(),
        response_modalities=[Modality.TEXT, Modality.IMAGE],
        image_config=types.ImageConfig(image_size=ImageSize(size).value),
    )


def _image_part(image: str) -> tuple[types.Part, ImagePayload]:
    payload = parse_data_url(image)
    return types.Part.from_bytes(data=payload.data, mime_type=payload.mime_type), payload


def build_retouch_request(
    library: PromptLibrary,
    image: str,
    style: EnhanceStyle | str,
    custom_text: str | None = None,
    *,
    image_size: ImageSize | None = None,
) -> RetouchRequest:
    """Free-text retouch request: the image, then the composed prompt text."""
    image_part, payload = _image_part(image)
    prompt_text = build_prompt(library, style, custom_text)

    logger.info(
        "Prepared retouch request.",
        style=str(style),
        mime_type=payload.mime_type,
        image_bytes=len(payload.data),
        has_custom_text=bool(custom_text),
    )
    return RetouchRequest(
        model=settings.gemini.model,
        contents=[image_part, types.Part.from_text(text=prompt_text)],
        config=_generation_config(image_size, library.system_instruction_text),
    )


def build_structured_retouch_request(
    library: PromptLibrary,
    image: str,
    style: EnhanceStyle | str,
    *,
    input_image_id: str = DEFAULT_INPUT_IMAGE_ID,
    image_size: ImageSize | None = None,
) -> RetouchRequest:
    """
    Structured retouch request: the image, the guardrail policy and the merged
    prompt object, both as JSON text. The system instruction is sent as JSON too.
    """
    image_part, payload = _image_part(image)
    prompt = compose_prompt(library, style, input_image_id=input_image_id)

    logger.info(
        "Prepared structured retouch request.",
        style=prompt.style_profile,
        mime_type=payload.mime_type,
        image_bytes=len(payload.data),
        step_count=len(prompt.retouching_steps),
    )
    return RetouchRequest(
        model=settings.gemini.model,
        contents=[
            image_part,
            types.Part.from_text(text=format_prompt(library.guardrail)),
            types.Part.from_text(text=format_prompt(prompt)),
        ],
        config=_generation_config(image_size, format_prompt(library.system_instruction)),
    )


def build_re_enhance_request(
    library: PromptLibrary,
    image: str,
    *,
    image_size: ImageSize | None = None,
) -> RetouchRequest:
    """Second, more aggressive pass over an already retouched image."""
    image_part, _ = _image_part(image)
    return RetouchRequest(
        model=settings.gemini.model,
        contents=[image_part, types.Part.from_text(text=build_re_enhance_prompt(library))],
        config=_generation_config(image_size, library.system_instruction_text),
    )


def build_background_request(
    library: PromptLibrary,
    portrait: str,
    background: str,
    *,
    image_size: ImageSize | None = None,
) -> RetouchRequest:
    """Portrait first, background second, then the compositing instruction."""
    portrait_part, portrait_payload = _image_part(portrait)
    background_part, _ = _image_part(background)

    logger.info(
        "Prepared background replacement request.",
        mime_type=portrait_payload.mime_type,
        image_bytes=len(portrait_payload.data),
    )
    return RetouchRequest(
        model=settings.gemini.model,
        contents=[
            portrait_part,
            background_part,
            types.Part.from_text(text=build_background_prompt(library.guardrail)),
        ],
        config=_generation_config(image_size),
    )
