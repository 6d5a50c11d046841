"""Nerd Font glyphs for file extensions."""

from clipicons.config import DEFAULT_FILE_GLYPH
from clipicons.models import GlyphGroup

GLYPH_GROUPS: tuple[GlyphGroup, ...] = (
    # Programming languages
    GlyphGroup("javascript", "\U000f031e", ("js", "mjs")),
    GlyphGroup("typescript", "\U000f06e6", ("ts",)),
    GlyphGroup("python", "\U000f0320", ("py",)),
    GlyphGroup("java", "\U000f0b37", ("java",)),
    GlyphGroup("cpp", "\U000f0672", ("cpp", "cc", "cxx")),
    GlyphGroup("c", "\U000f0671", ("c",)),
    GlyphGroup("rust", "\U000f1617", ("rs",)),
    GlyphGroup("go", "\U000f07d3", ("go",)),
    GlyphGroup("php", "\U000f031f", ("php",)),
    GlyphGroup("ruby", "\U000f0d2d", ("rb",)),
    # Web
    GlyphGroup("html", "\U000f031d", ("html", "htm")),
    GlyphGroup("css", "\U000f031c", ("css",)),
    GlyphGroup("json", "\U000f0626", ("json",)),
    GlyphGroup("xml", "\U000f05c0", ("xml",)),
    # Documents
    GlyphGroup("pdf", "\U000f0226", ("pdf",)),
    GlyphGroup("word", "\U000f022c", ("doc", "docx")),
    GlyphGroup("excel", "\U000f021b", ("xls", "xlsx")),
    GlyphGroup("powerpoint", "\U000f0227", ("ppt", "pptx")),
    GlyphGroup("text", "\U000f0219", ("txt",)),
    GlyphGroup("markdown", "\U000f0354", ("md",)),
    # Media
    GlyphGroup("image", "\U000f021f", ("png", "jpg", "jpeg", "gif", "bmp", "webp", "svg", "ico")),
    GlyphGroup("video", "\U000f022b", ("mp4", "mkv", "avi", "mov", "wmv", "flv", "webm")),
    GlyphGroup("audio", "\U000f0223", ("mp3", "wav", "flac", "ogg", "m4a", "wma")),
    # Archives
    GlyphGroup("archive", "\U000f06eb", ("zip", "tar", "gz", "bz2", "xz", "7z", "rar")),
)


def build_extension_table(groups: tuple[GlyphGroup, ...]) -> dict[str, GlyphGroup]:
    """Flatten glyph groups into an extension lookup.

    Raises:
        ValueError: If an extension is listed in more than one group.
    """
    table: dict[str, GlyphGroup] = {}
    for group in groups:
        for ext in group.extensions:
            key = ext.lower().lstrip(".")
            existing = table.get(key)
            if existing is not None:
                raise ValueError(f"Extension {key!r} is in both {existing.name!r} and {group.name!r}")
            table[key] = group
    return table


EXTENSION_GROUPS = build_extension_table(GLYPH_GROUPS)
EXTENSION_GLYPHS = {ext: group.glyph for ext, group in EXTENSION_GROUPS.items()}


def get_extension(file_path: str) -> str:
    # No dot means the whole path is the candidate
    return file_path.rsplit(".", 1)[-1].lower()


def get_glyph_group(file_path: str | None) -> GlyphGroup | None:
    if not file_path:
        return None
    return EXTENSION_GROUPS.get(get_extension(file_path))


def get_nerd_font_icon_for_extension(file_path: str | None) -> str:
    """Get the Nerd Font glyph for a file path.

    Args:
        file_path: Path or file name; only the part after the last dot counts.

    Returns:
        The group glyph, the generic file glyph when nothing matches, or an
        empty string for empty input.
    """
    if not file_path:
        return ""
    return EXTENSION_GLYPHS.get(get_extension(file_path), DEFAULT_FILE_GLYPH)
