from .http.body import (
	ResponseBody,
	Rendered,
	RenderError,
	RenderFailure,
	Json,
	Xml,
	Plist,
	Html,
	RawBody,
)  # NOQA: F401
from .http.response import (
	Response,
	Ok,
	Created,
	Accepted,
	MovedPermanently,
	BadRequest,
	Unauthorized,
	Forbidden,
	NotFound,
	InternalServerError,
	RawResponse,
	sameStatus,
)  # NOQA: F401
from .http.api import returns, respondHTML, respondText, redirect  # NOQA: F401
from .http.wire import encode, head  # NOQA: F401


# EOF
