from typing import Any

from ..utils.logging import warning
from .body import HTMLBody, JSONBody, PlistBody, RawBody
from .response import (
	Accepted,
	BadRequest,
	Created,
	Forbidden,
	InternalServerError,
	MovedPermanently,
	NotFound,
	Ok,
	RawResponse,
	Response,
	Unauthorized,
)
from .. import config

# --
# == Response API
#
# Shortcuts for handlers to create responses without spelling out the
# variants.

# Statuses that have a dedicated, bodiless variant
EMPTY_RESPONSES: dict[int, type[Response]] = {
	201: Created,
	202: Accepted,
	400: BadRequest,
	401: Unauthorized,
	403: Forbidden,
	404: NotFound,
	500: InternalServerError,
}


def returns(value: Any) -> Ok:
	"""Responds with `value` as JSON."""
	return Ok(JSONBody(value))


def respondPlist(value: Any) -> Ok:
	return Ok(PlistBody(value))


def respondHTML(html: str) -> Ok:
	"""Responds with the given HTML fragment wrapped in a document. The
	fragment is not escaped."""
	return Ok(HTMLBody(html))


def respondText(text: str) -> Ok:
	return Ok(RawBody(text))


def respondEmpty(status: int) -> Response:
	"""Returns the bodiless response for `status`, falling back to a raw
	response with an empty payload for statuses without a variant."""
	factory = EMPTY_RESPONSES.get(status)
	if factory:
		return factory()
	else:
		return RawResponse(status, b"")


def redirect(url: str) -> MovedPermanently:
	# SEE: https://developer.mozilla.org/en-US/docs/Web/HTTP/Redirections
	return MovedPermanently(str(url))


def notFound() -> NotFound:
	return NotFound()


def notAuthorized() -> Unauthorized:
	return Unauthorized()


def forbidden() -> Forbidden:
	return Forbidden()


def badRequest() -> BadRequest:
	return BadRequest()


def fail() -> InternalServerError:
	return InternalServerError()


def custom(code: int, payload: str | bytes = b"") -> RawResponse:
	"""Responds with an arbitrary status code and payload, `str` payloads
	are encoded as UTF-8."""
	if isinstance(payload, str):
		payload = payload.encode(config.DEFAULT_ENCODING)
	if not 100 <= code <= 999:
		warning("Custom response has a non-HTTP status code", Status=code)
	return RawResponse(code, payload)


# EOF
