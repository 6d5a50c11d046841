__version__ = "0.1.0"

from clipicons.glyphs import get_extension, get_glyph_group, get_nerd_font_icon_for_extension
from clipicons.mime import classify_mime, get_icon_for_mime
from clipicons.models import GlyphGroup, IconCategory, UrlParseResult
from clipicons.urls import get_favicon_url, is_url, parse_url

__all__ = [
    "GlyphGroup",
    "IconCategory",
    "UrlParseResult",
    "__version__",
    "classify_mime",
    "get_extension",
    "get_favicon_url",
    "get_glyph_group",
    "get_icon_for_mime",
    "get_nerd_font_icon_for_extension",
    "is_url",
    "parse_url",
]
