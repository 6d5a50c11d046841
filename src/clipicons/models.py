from dataclasses import dataclass
from enum import Enum


class IconCategory(str, Enum):
    IMAGE = "image"
    TEXT = "text"
    FILE = "file"
    VIDEO = "video"
    AUDIO = "audio"
    ARCHIVE = "archive"
    PDF = "pdf"


@dataclass(frozen=True)
class UrlParseResult:
    """Outcome of parsing clipboard text as an absolute URL.

    ``origin`` is None both on failure and for schemes with an opaque
    origin (``mailto:``, ``file:``, ...).
    """

    ok: bool
    url: str
    scheme: str | None = None
    host: str | None = None
    port: int | None = None
    origin: str | None = None
    error: str | None = None

    @classmethod
    def success(
        cls,
        url: str,
        scheme: str,
        host: str | None = None,
        port: int | None = None,
        origin: str | None = None,
    ) -> "UrlParseResult":
        return cls(ok=True, url=url, scheme=scheme, host=host, port=port, origin=origin)

    @classmethod
    def failure(cls, url: str, error: str) -> "UrlParseResult":
        return cls(ok=False, url=url, error=error)


@dataclass(frozen=True)
class GlyphGroup:
    name: str
    glyph: str
    extensions: tuple[str, ...]
