from collections.abc import Callable

from clipicons.config import ARCHIVE_MARKERS, PDF_MIME, PLAIN_TEXT_MIME, TEXT_MIME_TYPES, URI_LIST_MIME
from clipicons.models import IconCategory
from clipicons.urls import get_favicon_url, is_url

MimeRule = tuple[Callable[[str], bool], IconCategory]


def _starts_with(prefix: str) -> Callable[[str], bool]:
    return lambda mime_type: mime_type.startswith(prefix)


def _is_text(mime_type: str) -> bool:
    return mime_type.startswith("text/") or mime_type in TEXT_MIME_TYPES


def _is_archive(mime_type: str) -> bool:
    return any(marker in mime_type for marker in ARCHIVE_MARKERS)


# Evaluated in order, first match wins. The uri-list rule is shadowed by the
# text/ prefix rule and never fires.
MIME_RULES: tuple[MimeRule, ...] = (
    (_starts_with("image/"), IconCategory.IMAGE),
    (_is_text, IconCategory.TEXT),
    (lambda mime_type: mime_type == URI_LIST_MIME, IconCategory.FILE),
    (_starts_with("video/"), IconCategory.VIDEO),
    (_starts_with("audio/"), IconCategory.AUDIO),
    (_is_archive, IconCategory.ARCHIVE),
    (lambda mime_type: mime_type == PDF_MIME, IconCategory.PDF),
)


def classify_mime(mime_type: str) -> IconCategory:
    """Map a MIME type to its icon category, defaulting to FILE."""
    for matches, category in MIME_RULES:
        if matches(mime_type):
            return category
    return IconCategory.FILE


def get_icon_for_mime(mime_type: str | None, content: str | None = None) -> str:
    """Get the icon for a clipboard entry.

    Plain text that looks like an http(s) URL gets the site's favicon URL;
    everything else gets a category tag such as ``"image"`` or ``"archive"``.

    Args:
        mime_type: MIME type of the entry. Empty means nothing to show.
        content: Text content, only consulted for ``text/plain``.

    Returns:
        A favicon URL, a category tag, or an empty string.
    """
    if not mime_type:
        return ""

    if mime_type == PLAIN_TEXT_MIME and is_url(content):
        favicon = get_favicon_url(content)
        if favicon:
            return favicon

    return classify_mime(mime_type).value
