from dataclasses import dataclass
from typing import ClassVar

from .. import config
from .body import RenderError, RenderFailure, ResponseBody, reportFailure
from .status import HTTP_STATUS

# -----------------------------------------------------------------------------
#
# RESPONSE
#
# -----------------------------------------------------------------------------

RAW_REASON: str = "Custom"


@dataclass(slots=True, frozen=True)
class Response:
	"""An outgoing HTTP response, which the transport consumes in order:
	`statusCode()`, `reasonPhrase()`, `headers()` and then `body()`.

	Python equality is structural (same variant, same payload). To compare
	only the status, as in `response.isSameStatus(NotFound())`, use
	`isSameStatus` or `sameStatus`.
	"""

	Ok: ClassVar[type["Ok"]]
	Created: ClassVar[type["Created"]]
	Accepted: ClassVar[type["Accepted"]]
	MovedPermanently: ClassVar[type["MovedPermanently"]]
	BadRequest: ClassVar[type["BadRequest"]]
	Unauthorized: ClassVar[type["Unauthorized"]]
	Forbidden: ClassVar[type["Forbidden"]]
	NotFound: ClassVar[type["NotFound"]]
	InternalServerError: ClassVar[type["InternalServerError"]]
	Raw: ClassVar[type["RawResponse"]]

	def statusCode(self) -> int:
		match self:
			case Ok():
				return 200
			case Created():
				return 201
			case Accepted():
				return 202
			case MovedPermanently():
				return 301
			case BadRequest():
				return 400
			case Unauthorized():
				return 401
			case Forbidden():
				return 403
			case NotFound():
				return 404
			case InternalServerError():
				return 500
			case RawResponse(code):
				return code
			case _:
				raise TypeError(f"Unsupported response variant: {self!r}")

	def reasonPhrase(self) -> str:
		if isinstance(self, RawResponse):
			return RAW_REASON
		else:
			return HTTP_STATUS[self.statusCode()]

	def headers(self) -> dict[str, str]:
		"""Returns a new header map, which always has a `Server` entry."""
		headers: dict[str, str] = {"Server": config.SERVER_NAME}
		match self:
			case Ok(content):
				_, content_type = content.render()
				if content_type is not None:
					headers["Content-Type"] = content_type
			case MovedPermanently(location):
				headers["Location"] = location
		return headers

	def body(self) -> bytes | None:
		"""Returns the payload, or `None` when the response has no body
		(which is different from an empty body)."""
		match self:
			case Ok(content):
				text, _ = content.render()
				if text is None:
					return None
				try:
					return text.encode(config.DEFAULT_ENCODING)
				except UnicodeEncodeError as e:
					reportFailure(
						RenderError(
							RenderFailure.Encoding,
							f"Body text can't be encoded as {config.DEFAULT_ENCODING}",
							e,
						),
						Status=self.statusCode(),
					)
					return None
			case RawResponse(_, payload):
				return payload
			case _:
				return None

	def isSameStatus(self, other: "Response") -> bool:
		"""Compares only the status codes, ignoring bodies, locations and
		payloads. Not to be used as a cache or deduplication key."""
		return self.statusCode() == other.statusCode()

	def __str__(self) -> str:
		return f"Response({self.statusCode()} {self.reasonPhrase()})"


def sameStatus(a: Response, b: Response) -> bool:
	return a.isSameStatus(b)


@dataclass(slots=True, frozen=True)
class Ok(Response):
	content: ResponseBody

	def __post_init__(self) -> None:
		if not isinstance(self.content, ResponseBody):
			raise TypeError(f"Ok expects a ResponseBody, got: {type(self.content)}")


@dataclass(slots=True, frozen=True)
class Created(Response):
	pass


@dataclass(slots=True, frozen=True)
class Accepted(Response):
	pass


@dataclass(slots=True, frozen=True)
class MovedPermanently(Response):
	location: str


@dataclass(slots=True, frozen=True)
class BadRequest(Response):
	pass


@dataclass(slots=True, frozen=True)
class Unauthorized(Response):
	pass


@dataclass(slots=True, frozen=True)
class Forbidden(Response):
	pass


@dataclass(slots=True, frozen=True)
class NotFound(Response):
	pass


@dataclass(slots=True, frozen=True)
class InternalServerError(Response):
	pass


@dataclass(slots=True, frozen=True)
class RawResponse(Response):
	"""Any status code with an arbitrary payload. The code is not checked
	against the status registry and the reason phrase is always `Custom`."""

	code: int
	payload: bytes

	def __post_init__(self) -> None:
		if not isinstance(self.payload, bytes):
			raise TypeError(f"Raw response expects bytes, got: {type(self.payload)}")


Response.Ok = Ok
Response.Created = Created
Response.Accepted = Accepted
Response.MovedPermanently = MovedPermanently
Response.BadRequest = BadRequest
Response.Unauthorized = Unauthorized
Response.Forbidden = Forbidden
Response.NotFound = NotFound
Response.InternalServerError = InternalServerError
Response.Raw = RawResponse

# EOF
