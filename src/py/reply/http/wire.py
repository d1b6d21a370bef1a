from typing import Iterator, NamedTuple

from .response import Response

# --
# == Wire
#
# Frames a response as HTTP/1.1 bytes: status line, headers, blank line and
# then the body if there is one. The `Content-Length` header is added here,
# as responses don't carry it.

EOL: bytes = b"\r\n"
HEADER_ENCODING: str = "latin-1"


class HeaderEncodingError(ValueError):
	"""A header name or value can't be written on the wire."""

	def __init__(self, name: str, value: str):
		super().__init__(f"Header can't be written on the wire: {name}")
		self.name: str = name
		self.value: str = value


class HTTPResponseLine(NamedTuple):
	"""Represents a response status line"""

	protocol: str
	status: int
	message: str

	def encode(self) -> bytes:
		return f"{self.protocol} {self.status} {self.message}".encode(HEADER_ENCODING) + EOL


def responseLine(response: Response, protocol: str = "HTTP/1.1") -> HTTPResponseLine:
	return HTTPResponseLine(protocol, response.statusCode(), response.reasonPhrase())


def encodeHeader(name: str, value: str) -> bytes:
	if "\r" in value or "\n" in value or "\r" in name or "\n" in name:
		raise HeaderEncodingError(name, value)
	try:
		return f"{name}: {value}".encode(HEADER_ENCODING) + EOL
	except UnicodeEncodeError as e:
		raise HeaderEncodingError(name, value) from e


def encodeHeaders(
	response: Response, body: bytes | None, contentLength: bool = True
) -> bytes:
	"""Encodes the headers block, including the terminating blank line."""
	headers = response.headers()
	if contentLength and body is not None and "Content-Length" not in headers:
		headers["Content-Length"] = str(len(body))
	return b"".join(encodeHeader(k, v) for k, v in headers.items()) + EOL


def head(
	response: Response, protocol: str = "HTTP/1.1", contentLength: bool = True
) -> bytes:
	"""Serializes the status line and headers, terminated by a blank line."""
	return responseLine(response, protocol).encode() + encodeHeaders(
		response, response.body() if contentLength else None, contentLength
	)


def iterEncode(
	response: Response, protocol: str = "HTTP/1.1", contentLength: bool = True
) -> Iterator[bytes]:
	"""Yields the status line, the headers block and the body (when there is
	one), rendering the body only once."""
	yield responseLine(response, protocol).encode()
	body = response.body()
	yield encodeHeaders(response, body, contentLength)
	if body is not None:
		yield body


def encode(
	response: Response, protocol: str = "HTTP/1.1", contentLength: bool = True
) -> bytes:
	return b"".join(iterEncode(response, protocol, contentLength))


# EOF
