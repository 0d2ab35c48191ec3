"""Building and serialising HTTP responses."""

from __future__ import annotations

_REASON_PHRASES = {
    200: "OK",
    400: "Bad Request",
    404: "Not Found",
    500: "Internal Server Error",
}

# Headers written first, in this order; any others follow in insertion order.
_HEADER_ORDER = ("connection", "content-type", "content-length")


def reason_phrase(status_code: int) -> str:
    """Return the reason phrase for ``status_code``, or 'Unknown'."""
    return _REASON_PHRASES.get(status_code, "Unknown")


def _display_name(name: str) -> str:
    """Capitalise the first letter and every letter that follows a hyphen."""
    return "-".join(part[:1].upper() + part[1:] for part in name.split("-"))


class HttpResponse:
    """An HTTP/1.1 response with case-insensitive headers and a body.

    Every response starts with a ``Connection: close`` header. The body may
    be text, which is sent UTF-8 encoded, or raw bytes.
    """

    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.headers: dict[str, str] = {}
        self.body: bytes | str = b""
        self.set_header("Connection", "close")

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any value it had."""
        self.headers[name.lower()] = value

    def header(self, name: str) -> str:
        """Return a header's value by case-insensitive name, or '' if absent."""
        return self.headers.get(name.lower(), "")

    def _ordered_headers(self) -> list[tuple[str, str]]:
        first = [(name, self.headers[name]) for name in _HEADER_ORDER if name in self.headers]
        rest = [
            (name, value)
            for name, value in self.headers.items()
            if name not in _HEADER_ORDER
        ]
        return first + rest

    def to_bytes(self) -> bytes:
        """Serialise the status line, headers and body for the wire."""
        lines = [f"HTTP/1.1 {self.status_code} {reason_phrase(self.status_code)}\r\n"]
        lines.extend(
            f"{_display_name(name)}: {value}\r\n" for name, value in self._ordered_headers()
        )
        lines.append("\r\n")
        body = self.body.encode("utf-8") if isinstance(self.body, str) else bytes(self.body)
        return "".join(lines).encode("utf-8") + body