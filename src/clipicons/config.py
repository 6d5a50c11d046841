URL_PREFIXES = ("http://", "https://")
FAVICON_PATH = "/favicon.ico"

# Schemes with a tuple origin, mapped to the port omitted from the origin
DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

TEXT_MIME_TYPES = frozenset({"application/json", "application/xml", "application/javascript"})
PLAIN_TEXT_MIME = "text/plain"
URI_LIST_MIME = "text/uri-list"
PDF_MIME = "application/pdf"
ARCHIVE_MARKERS = ("zip", "tar", "gz", "bz2", "xz", "7z", "rar")

DEFAULT_FILE_GLYPH = "\U000f0214"  # generic file
