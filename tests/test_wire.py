"""Framing responses as HTTP/1.1 bytes."""

import pytest

from reply import config
from reply.http.body import Html, Json
from reply.http.response import MovedPermanently, NotFound, Ok, RawResponse
from reply.http.wire import (
	HeaderEncodingError,
	HTTPResponseLine,
	encode,
	head,
	iterEncode,
	responseLine,
)


def test_response_line() -> None:
	assert responseLine(NotFound()) == HTTPResponseLine("HTTP/1.1", 404, "Not Found")
	assert RawResponse(599, b"").statusCode() == 599
	assert responseLine(RawResponse(599, b""), "HTTP/1.0").encode() == b"HTTP/1.0 599 Custom\r\n"


def test_bodiless_response() -> None:
	data = encode(NotFound())
	assert data == f"HTTP/1.1 404 Not Found\r\nServer: {config.SERVER_NAME}\r\n\r\n".encode()


def test_ok_response_has_content_length_and_body() -> None:
	data = encode(Ok(Html("hi")))
	body = b"<html><body>hi</body></html>"
	assert data.startswith(b"HTTP/1.1 200 OK\r\n")
	assert b"Content-Type: text/html\r\n" in data
	assert f"Content-Length: {len(body)}\r\n".encode() in data
	assert data.endswith(b"\r\n\r\n" + body)


def test_content_length_can_be_left_to_the_transport() -> None:
	data = encode(Ok(Html("hi")), contentLength=False)
	assert b"Content-Length" not in data


def test_empty_raw_payload_is_still_a_body() -> None:
	assert b"Content-Length: 0\r\n" in encode(RawResponse(200, b""))


def test_head_stops_at_the_blank_line() -> None:
	data = head(Ok(Json([1])))
	assert data.endswith(b"\r\n\r\n")
	assert b"[" not in data


def test_iter_encode_order() -> None:
	parts = list(iterEncode(MovedPermanently("https://x/y")))
	assert parts[0] == b"HTTP/1.1 301 Moved Permanently\r\n"
	assert b"Location: https://x/y\r\n" in parts[1]
	assert parts[1].endswith(b"\r\n\r\n")
	assert len(parts) == 2


def test_header_injection_is_rejected() -> None:
	with pytest.raises(HeaderEncodingError):
		encode(MovedPermanently("/a\r\nSet-Cookie: x=1"))


def test_non_latin1_header_is_rejected() -> None:
	with pytest.raises(HeaderEncodingError) as info:
		encode(MovedPermanently("/☃"))
	assert info.value.name == "Location"
