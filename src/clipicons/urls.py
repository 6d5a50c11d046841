"""URL detection and favicon derivation for clipboard text."""

import ipaddress
import logging
import re
from urllib.parse import unquote, urlsplit

from clipicons.config import DEFAULT_PORTS, FAVICON_PATH, URL_PREFIXES
from clipicons.models import UrlParseResult

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile("(?:" + "|".join(re.escape(p) for p in URL_PREFIXES) + r")\S+")
SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*")
FORBIDDEN_HOST_CHARS = re.compile(r"[\s#%/:<>?@\[\\\]^|]")
IPV4_PART_PATTERNS = {
    10: re.compile(r"[0-9]*", re.ASCII),
    16: re.compile(r"[0-9a-fA-F]*", re.ASCII),
    8: re.compile(r"[0-7]*", re.ASCII),
}


def is_url(text: str | None) -> bool:
    """Check if text looks like an http(s) URL.

    Purely syntactic: the trimmed text must start with ``http://`` or
    ``https://`` followed by at least one non-whitespace character.
    """
    if not text:
        return False
    return URL_PATTERN.match(text.strip()) is not None


def _fail(url: str, error: str) -> UrlParseResult:
    logger.debug("Could not parse %r as a URL: %s", url, error)
    return UrlParseResult.failure(url, error)


def _parse_ipv4_part(part: str) -> int | None:
    if part[:2] in ("0x", "0X"):
        digits, base = part[2:], 16
    elif len(part) > 1 and part.startswith("0"):
        digits, base = part[1:], 8
    else:
        digits, base = part, 10
    if not IPV4_PART_PATTERNS[base].fullmatch(digits):
        return None
    return int(digits, base) if digits else 0


def _ipv4_parts(host: str) -> list[str] | None:
    """Split a host into IPv4 parts, or None if it is a domain name.

    A host is an IPv4 address when its last label is a number, so
    ``2130706433`` and ``0x7f.1`` are addresses but ``v1.example`` is not.
    """
    parts = host.split(".")
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    last = parts[-1]
    if last.isascii() and last.isdigit():
        return parts
    if last[:2] in ("0x", "0X") and _parse_ipv4_part(last) is not None:
        return parts
    return None


def _parse_ipv4(parts: list[str]) -> str | None:
    if len(parts) > 4:
        return None
    numbers = [_parse_ipv4_part(part) if part else None for part in parts]
    if None in numbers:
        return None
    if any(n > 255 for n in numbers[:-1]) or numbers[-1] >= 256 ** (5 - len(numbers)):
        return None
    address = numbers[-1]
    for i, n in enumerate(numbers[:-1]):
        address += n * 256 ** (3 - i)
    return str(ipaddress.IPv4Address(address))


def _normalize_host(host: str) -> str | None:
    if ":" in host:
        try:
            return "[" + ipaddress.IPv6Address(host).compressed + "]"
        except ValueError:
            return None

    host = unquote(host)
    if not host.isascii():
        try:
            host = host.encode("idna").decode("ascii")
        except UnicodeError:
            return None
    host = host.lower()
    if not host or FORBIDDEN_HOST_CHARS.search(host):
        return None

    parts = _ipv4_parts(host)
    if parts is not None:
        return _parse_ipv4(parts)
    return host


def parse_url(text: str | None) -> UrlParseResult:
    """Parse text as an absolute URL without raising.

    For http(s), ws(s) and ftp URLs the host is normalized the way a
    browser does it: backslashes count as slashes, percent-escapes are
    decoded, internationalized names become punycode and numeric IPv4
    hosts are rewritten in dotted form.

    Args:
        text: Candidate URL, surrounding whitespace is ignored.

    Returns:
        A UrlParseResult. Check ``ok`` before reading the other fields.
    """
    url = (text or "").strip()
    if not url:
        return _fail(url, "empty input")

    scheme, sep, _ = url.partition(":")
    if not sep or not SCHEME_PATTERN.fullmatch(scheme):
        return _fail(url, "missing or invalid scheme")
    scheme = scheme.lower()

    if scheme not in DEFAULT_PORTS:
        return UrlParseResult.success(url, scheme)

    url = url.replace("\\", "/")
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as exc:
        return _fail(url, str(exc))

    if not parts.hostname:
        return _fail(url, "missing host")
    host = _normalize_host(parts.hostname)
    if host is None:
        return _fail(url, f"invalid host {parts.hostname!r}")

    origin = f"{scheme}://{host}"
    if port is not None and port != DEFAULT_PORTS[scheme]:
        origin += f":{port}"
    return UrlParseResult.success(url, scheme, host=host, port=port, origin=origin)


def get_favicon_url(text: str | None) -> str:
    """Return ``<origin>/favicon.ico`` for a URL, or an empty string.

    URLs without a host-based origin, such as ``mailto:`` or ``file:``
    links, also give an empty string rather than ``null/favicon.ico``.
    """
    if not text:
        return ""
    result = parse_url(text)
    if not result.ok or result.origin is None:
        return ""
    return result.origin + FAVICON_PATH
