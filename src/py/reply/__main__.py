import argparse
import sys
from typing import BinaryIO

from .http.body import HTMLBody, JSONBody, PlistBody, RawBody, ResponseBody, XMLBody
from .http.response import Ok, RawResponse, Response
from .http.wire import encode, head
from .utils.json import unjson
from .utils.logging import debug, error, exception
from . import config

# --
# == Reply command line
#
# Renders the content of a file (or stdin) as a response and writes its wire
# form to stdout, which is handy to check what a handler would send.

BODY_TYPES: dict[str, type[ResponseBody]] = {
	"json": JSONBody,
	"plist": PlistBody,
	"xml": XMLBody,
	"html": HTMLBody,
	"raw": RawBody,
}


def readInput(path: str | None) -> bytes:
	if not path or path == "-":
		return sys.stdin.buffer.read()
	with open(path, "rb") as f:
		return f.read()


def makeResponse(data: bytes, type: str, status: int | None = None) -> Response:
	"""Creates the response for the given input. Raises `ValueError` when
	structured input is not valid JSON."""
	if status is not None:
		return RawResponse(status, data)
	factory = BODY_TYPES[type]
	if factory in (JSONBody, PlistBody, XMLBody):
		return Ok(factory(unjson(data)))
	else:
		return Ok(factory(data.decode(config.DEFAULT_ENCODING)))


def main(args: list[str] | None = None, output: BinaryIO | None = None) -> int:
	parser = argparse.ArgumentParser(
		prog="reply",
		description="Renders data as an HTTP response",
		formatter_class=argparse.ArgumentDefaultsHelpFormatter,
	)
	parser.add_argument(
		"-t",
		"--type",
		action="store",
		dest="type",
		choices=list(BODY_TYPES),
		default="json",
		help="The kind of body, JSON input is expected for json, plist and xml",
	)
	parser.add_argument(
		"-s",
		"--status",
		action="store",
		dest="status",
		type=int,
		help="Sends the input as-is with the given status code",
	)
	parser.add_argument(
		"-H",
		"--head",
		action="store_true",
		dest="head",
		help="Only outputs the status line and headers",
	)
	parser.add_argument(
		"path",
		metavar="FILE",
		nargs="?",
		help="The input file, stdin when omitted",
	)
	options = parser.parse_args(args=args)
	out: BinaryIO = output or sys.stdout.buffer
	try:
		data = readInput(options.path)
	except OSError as e:
		exception(e, f"Could not read {options.path}")
		return 1
	try:
		response = makeResponse(data, options.type, options.status)
	except (ValueError, UnicodeDecodeError) as e:
		error("Input can't be used as a body", 1, Path=options.path, Reason=str(e))
		return 1
	debug("Rendering response", Status=response.statusCode(), Type=options.type)
	out.write(head(response) if options.head else encode(response))
	out.flush()
	return 0


if __name__ == "__main__":
	sys.exit(main(sys.argv[1:]))
# EOF
