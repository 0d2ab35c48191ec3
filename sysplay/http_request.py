"""Parsing of raw HTTP request text."""

from __future__ import annotations

import io
from dataclasses import dataclass, field


class RequestParseError(ValueError):
    """Raised when request text cannot be parsed."""


@dataclass
class HttpRequest:
    """An HTTP request: request line, headers keyed by lower-case name, body."""

    method: str = ""
    uri: str = ""
    version: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def parse(cls, text: str) -> HttpRequest:
        """Parse raw request text.

        Headers are read up to a line consisting of a lone carriage return;
        whatever follows is the body. Raises RequestParseError for an empty
        request or a request line without method, URI and version.
        """
        stream = io.StringIO(text, newline="\n")
        line = stream.readline()
        if not line:
            raise RequestParseError("Empty request")
        line = line.removesuffix("\n").removesuffix("\r")

        parts = line.split()
        if len(parts) < 3:
            raise RequestParseError(f"Malformed request line: {line!r}")
        method, uri, version = parts[:3]

        headers: dict[str, str] = {}
        for raw in iter(stream.readline, ""):
            line = raw.removesuffix("\n")
            if line == "\r":
                break
            line = line.removesuffix("\r")
            name, colon, value = line.partition(":")
            if colon:
                headers[name.lower()] = value.lstrip(" ")

        return cls(
            method=method.upper(),
            uri=uri,
            version=version,
            headers=headers,
            body=stream.read(),
        )

    def header(self, name: str) -> str:
        """Return a header's value by case-insensitive name, or '' if absent."""
        return self.headers.get(name.lower(), "")