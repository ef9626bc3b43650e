# skin_retoucher/data/constants.py
from enum import Enum


class EnhanceStyle(str, Enum):
    """Retouching styles offered to the user."""
    NATURAL = "Natural Pro"
    SOFT = "Soft Beauty"
    SCULPTED = "Sculpted Glow"
    DARK_SKIN = "Dark Skin Glow"
    GILDED = "Gilded Editorial"
    ULTRA_GLAM = "Ultra Glam"
    CUSTOM = "Custom Edit"  # free-text edit, never has a template


class OutputFormat(str, Enum):
    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"


class ImageSize(str, Enum):
    """Output sizes accepted by the image model."""
    HD_1K = "1K"
    QHD_2K = "2K"
    UHD_4K = "4K"


TASK_TYPE = "image_retouching"
MAINTAIN_ORIGINAL = "maintain_original"
DEFAULT_INPUT_IMAGE_ID = "input_image"
DEFAULT_IMAGE_MIME = "image/jpeg"
