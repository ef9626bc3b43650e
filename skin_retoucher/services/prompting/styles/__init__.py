from .sculpted_glow import STYLE_SCULPTED_GLOW
from .dark_skin_glow import STYLE_DARK_SKIN_GLOW
from .gilded_editorial import STYLE_GILDED_EDITORIAL
from .ultra_glam import STYLE_ULTRA_GLAM
from .soft_beauty import STYLE_SOFT_BEAUTY

# Catalog order. The first entry is the fallback for unknown style ids.
# Natural Pro is hidden from the catalog.
DEFAULT_STYLES = (
    STYLE_SCULPTED_GLOW,
    STYLE_DARK_SKIN_GLOW,
    STYLE_GILDED_EDITORIAL,
    STYLE_ULTRA_GLAM,
    STYLE_SOFT_BEAUTY,
)

__all__ = [
    "STYLE_SCULPTED_GLOW",
    "STYLE_DARK_SKIN_GLOW",
    "STYLE_GILDED_EDITORIAL",
    "STYLE_ULTRA_GLAM",
    "STYLE_SOFT_BEAUTY",

    "DEFAULT_STYLES",
]
