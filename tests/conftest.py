import pytest

from skin_retoucher.services.prompting.library import build_default_library


@pytest.fixture
def library():
    return build_default_library()


@pytest.fixture
def strict_library():
    return build_default_library(strict_style_lookup=True)
