import pytest

from sysplay.http_response import HttpResponse, reason_phrase


def test_default_response_wire_format():
    assert HttpResponse().to_bytes() == b"HTTP/1.1 200 OK\r\nConnection: close\r\n\r\n"


def test_default_status_code_and_connection_header():
    response = HttpResponse()
    assert response.status_code == 200
    assert response.header("Connection") == "close"


@pytest.mark.parametrize(
    ("code", "phrase"),
    [
        (200, "OK"),
        (400, "Bad Request"),
        (404, "Not Found"),
        (500, "Internal Server Error"),
        (418, "Unknown"),
    ],
)
def test_reason_phrase(code, phrase):
    assert reason_phrase(code) == phrase


def test_status_line_uses_reason_phrase():
    data = HttpResponse(404).to_bytes()
    assert data.startswith(b"HTTP/1.1 404 Not Found\r\n")


def test_header_lookup_is_case_insensitive():
    response = HttpResponse()
    response.set_header("Content-Type", "text/html")
    assert response.header("content-type") == "text/html"
    assert response.header("CONTENT-TYPE") == "text/html"


def test_missing_header_is_empty():
    assert HttpResponse().header("X-Missing") == ""


def test_set_header_replaces_value():
    response = HttpResponse()
    response.set_header("content-type", "text/plain")
    response.set_header("Content-Type", "text/css")
    assert response.header("content-type") == "text/css"
    assert response.to_bytes().count(b"Content-Type:") == 1


def test_known_headers_come_first_in_fixed_order():
    response = HttpResponse()
    response.set_header("x-extra", "1")
    response.set_header("Content-Length", "5")
    response.set_header("Content-Type", "text/plain")
    data = response.to_bytes()
    positions = [
        data.index(b"Connection: close\r\n"),
        data.index(b"Content-Type: text/plain\r\n"),
        data.index(b"Content-Length: 5\r\n"),
        data.index(b"X-Extra: 1\r\n"),
    ]
    assert positions == sorted(positions)


def test_header_names_are_capitalised_after_hyphens():
    response = HttpResponse()
    response.set_header("x-custom-thing", "v")
    assert b"\r\nX-Custom-Thing: v\r\n" in response.to_bytes()


def test_text_body_follows_blank_line():
    response = HttpResponse(400)
    response.body = "Invalid URI"
    head, _, body = response.to_bytes().partition(b"\r\n\r\n")
    assert body == b"Invalid URI"
    assert head.startswith(b"HTTP/1.1 400 Bad Request")


def test_binary_body_is_sent_unchanged():
    payload = bytes(range(256))
    response = HttpResponse()
    response.body = payload
    assert response.to_bytes().endswith(b"\r\n\r\n" + payload)