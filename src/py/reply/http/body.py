from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, NamedTuple

from .. import config
from ..utils import json as jsonmodel
from ..utils import plist as plistmodel
from ..utils.htmpl import H, html, raw
from ..utils.logging import warning

# -----------------------------------------------------------------------------
#
# ERRORS
#
# -----------------------------------------------------------------------------


class RenderFailure(Enum):
	"""The reasons why a body could not be rendered."""

	Validation = 0
	Serialization = 1
	Unsupported = 2
	Encoding = 3


class RenderError(Exception):
	"""Describes a rendering failure. These are returned as part of a
	`Rendered` value, not raised: the response still carries a diagnostic
	text."""

	def __init__(
		self,
		failure: RenderFailure,
		message: str,
		cause: BaseException | None = None,
	):
		super().__init__(message)
		self.failure: RenderFailure = failure
		self.message: str = message
		self.cause: BaseException | None = cause


def reportFailure(err: RenderError, **context: str | int | None) -> RenderError:
	if config.LOG_FAILURES:
		warning(
			err.message,
			Failure=err.failure.name,
			Cause=type(err.cause).__name__ if err.cause else None,
			**context,
		)
	return err


# -----------------------------------------------------------------------------
#
# RENDERED
#
# -----------------------------------------------------------------------------

MSG_INVALID: str = "Invalid object to serialise"
MSG_SERIALISATION: str = "Serialisation error"
MSG_XML_UNSUPPORTED: str = "XML serialization not supported."


class Rendered(NamedTuple):
	"""The outcome of rendering a body: either a text and its content type,
	or a diagnostic text with no content type and the matching error."""

	text: str | None
	contentType: str | None = None
	error: RenderError | None = None

	@staticmethod
	def Failed(failure: RenderFailure, message: str, cause: BaseException | None = None) -> "Rendered":
		return Rendered(message, None, RenderError(failure, message, cause))


# -----------------------------------------------------------------------------
#
# BODY
#
# -----------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class ResponseBody:
	"""The content of a response, rendered to text according to its kind.

	Variants are `Json`, `Xml`, `Plist`, `Html` and `Raw`, available both as
	module classes and as attributes of `ResponseBody`. Bodies are immutable
	and rendering never mutates them, so rendering the same body twice gives
	the same result.

	NOTE: `Html` bodies are NOT escaped, the caller is responsible for the
	safety of the markup it passes.
	"""

	Json: ClassVar[type["JSONBody"]]
	Xml: ClassVar[type["XMLBody"]]
	Plist: ClassVar[type["PlistBody"]]
	Html: ClassVar[type["HTMLBody"]]
	Raw: ClassVar[type["RawBody"]]

	def render(self) -> tuple[str | None, str | None]:
		"""Returns `(text, contentType)`, where a missing content type means
		the text is a diagnostic of why rendering failed."""
		res = self.rendered()
		return res.text, res.contentType

	def rendered(self) -> Rendered:
		match self:
			case JSONBody(value):
				res = renderData(
					value, jsonmodel.validate, jsonmodel.json, "application/json"
				)
			case XMLBody():
				res = Rendered.Failed(RenderFailure.Unsupported, MSG_XML_UNSUPPORTED)
			case PlistBody(value):
				res = renderData(
					value, plistmodel.validate, plistmodel.plist, "application/plist"
				)
			case HTMLBody(text):
				res = Rendered(html(H.html(H.body(raw(text)))), "text/html")
			case RawBody(text):
				res = Rendered(text, "application/octet-stream")
			case _:
				raise TypeError(f"Unsupported body variant: {self!r}")
		if res.error is not None:
			reportFailure(res.error, Body=type(self).__name__)
		return res


def renderData(
	value: Any,
	validate: Callable[[Any], None],
	serialize: Callable[[Any], str],
	contentType: str,
) -> Rendered:
	try:
		validate(value)
	except jsonmodel.InvalidValue as e:
		return Rendered.Failed(RenderFailure.Validation, f"{MSG_INVALID}: {e}", e)
	except RecursionError as e:
		return Rendered.Failed(
			RenderFailure.Validation, f"{MSG_INVALID}: nesting is too deep", e
		)
	try:
		return Rendered(serialize(value), contentType)
	except (TypeError, ValueError, OverflowError, RecursionError) as e:
		return Rendered.Failed(
			RenderFailure.Serialization, f"{MSG_SERIALISATION}: {e}", e
		)


@dataclass(slots=True, frozen=True)
class JSONBody(ResponseBody):
	"""A data node rendered as pretty-printed `application/json`."""

	value: Any


@dataclass(slots=True, frozen=True)
class XMLBody(ResponseBody):
	"""Not supported: always renders to a diagnostic."""

	value: Any


@dataclass(slots=True, frozen=True)
class PlistBody(ResponseBody):
	"""A data node rendered as an XML property list."""

	value: Any


@dataclass(slots=True, frozen=True)
class HTMLBody(ResponseBody):
	text: str

	def __post_init__(self) -> None:
		if not isinstance(self.text, str):
			raise TypeError(f"HTML body expects a str, got: {type(self.text)}")


@dataclass(slots=True, frozen=True)
class RawBody(ResponseBody):
	text: str

	def __post_init__(self) -> None:
		if not isinstance(self.text, str):
			raise TypeError(f"Raw body expects a str, got: {type(self.text)}")


ResponseBody.Json = JSONBody
ResponseBody.Xml = XMLBody
ResponseBody.Plist = PlistBody
ResponseBody.Html = HTMLBody
ResponseBody.Raw = RawBody

# Short aliases, as in `Ok(Json(...))`
Json = JSONBody
Xml = XMLBody
Plist = PlistBody
Html = HTMLBody
Raw = RawBody

# EOF
