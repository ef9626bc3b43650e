# skin_retoucher/services/prompting/factory.py
from functools import lru_cache

from skin_retoucher.data.settings import settings

from .library import PromptLibrary, build_default_library


@lru_cache(maxsize=1)
def get_prompt_library() -> PromptLibrary:
    """
    Returns the process-wide prompt library: the JSON asset from settings
    when one is configured, the compiled-in templates otherwise.
    """
    strict = settings.prompting.strict_style_lookup
    if settings.prompting.library_path:
        return PromptLibrary.from_json_file(
            settings.prompting.library_path, strict_style_lookup=strict
        )
    return build_default_library(strict_style_lookup=strict)
