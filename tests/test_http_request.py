import pytest

from sysplay.http_request import HttpRequest, RequestParseError


def test_parse_request_line():
    request = HttpRequest.parse("GET /index.html HTTP/1.1\r\n\r\n")
    assert request.method == "GET"
    assert request.uri == "/index.html"
    assert request.version == "HTTP/1.1"
    assert request.body == ""


def test_method_is_uppercased():
    request = HttpRequest.parse("post /submit HTTP/1.0\r\n\r\n")
    assert request.method == "POST"


def test_headers_are_case_insensitive():
    request = HttpRequest.parse(
        "GET / HTTP/1.1\r\nHost: example.com\r\nUser-Agent: probe\r\n\r\n"
    )
    assert request.header("host") == "example.com"
    assert request.header("HOST") == "example.com"
    assert request.header("user-agent") == "probe"


def test_missing_header_is_empty():
    request = HttpRequest.parse("GET / HTTP/1.1\r\n\r\n")
    assert request.header("Content-Type") == ""


def test_value_leading_spaces_trimmed_trailing_kept():
    request = HttpRequest.parse("GET / HTTP/1.1\r\nX-Test:    value  \r\n\r\n")
    assert request.header("x-test") == "value  "


def test_body_after_blank_line():
    request = HttpRequest.parse(
        "POST /api HTTP/1.1\r\nContent-Length: 11\r\n\r\nhello\r\nworld"
    )
    assert request.body == "hello\r\nworld"
    assert request.header("content-length") == "11"


def test_line_without_colon_is_ignored():
    request = HttpRequest.parse("GET / HTTP/1.1\r\nnonsense\r\nA: b\r\n\r\n")
    assert request.headers == {"a": "b"}


def test_later_header_overrides_earlier():
    request = HttpRequest.parse("GET / HTTP/1.1\r\nA: first\r\na: second\r\n\r\n")
    assert request.header("A") == "second"


def test_request_without_headers_terminator():
    request = HttpRequest.parse("GET /x HTTP/1.1")
    assert request.uri == "/x"
    assert request.headers == {}


def test_bare_newlines_do_not_end_headers():
    request = HttpRequest.parse("GET / HTTP/1.1\nA: b\n\nC: d\n")
    assert request.body == ""
    assert request.header("c") == "d"


def test_extra_request_line_tokens_ignored():
    request = HttpRequest.parse("GET / HTTP/1.1 extra\r\n\r\n")
    assert request.version == "HTTP/1.1"


@pytest.mark.parametrize("text", ["", "\r\n", "GET /\r\n\r\n", "GET\r\n"])
def test_malformed_requests(text):
    with pytest.raises(RequestParseError):
        HttpRequest.parse(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        HttpRequest.parse("")