from typing import Any, TypeAlias, cast
import json as basejson
import math
from .. import config

TJSON: TypeAlias = None | int | float | bool | str | list[Any] | dict[str, Any]


class InvalidValue(ValueError):
	"""Raised when a value can't be represented in a data model, `path` locates
	the offending node."""

	def __init__(self, reason: str, path: tuple[str | int, ...] = ()):
		super().__init__(f"{reason} at {formatPath(path)}")
		self.reason: str = reason
		self.path: tuple[str | int, ...] = path


def formatPath(path: tuple[str | int, ...]) -> str:
	return "$" + "".join(f"[{_!r}]" for _ in path)


def validate(value: Any, path: tuple[str | int, ...] = (), *, seen: set[int] | None = None) -> None:
	"""Ensures that `value` is a JSON data node: dicts with `str` keys, lists,
	tuples, strings, ints, finite floats, booleans and `None`, without
	cycles."""
	if value is None or isinstance(value, (bool, int, str)):
		return None
	elif isinstance(value, float):
		if not math.isfinite(value):
			raise InvalidValue(f"Non-finite number {value}", path)
		return None
	elif isinstance(value, (dict, list, tuple)):
		visiting = set() if seen is None else seen
		key = id(value)
		if key in visiting:
			raise InvalidValue("Cyclic reference", path)
		visiting.add(key)
		if isinstance(value, dict):
			for k, v in value.items():
				if not isinstance(k, str):
					raise InvalidValue(f"Non-string key {k!r}", path)
				validate(v, path + (k,), seen=visiting)
		else:
			for i, v in enumerate(value):
				validate(v, path + (i,), seen=visiting)
		visiting.discard(key)
		return None
	else:
		raise InvalidValue(f"Unsupported type {type(value).__name__}", path)


def json(value: Any, *, indent: int | None = None) -> str:
	"""Serializes an already validated value as pretty-printed JSON text."""
	return basejson.dumps(
		value,
		indent=config.JSON_INDENT if indent is None else indent,
		ensure_ascii=False,
		allow_nan=False,
	)


def unjson(value: bytes | str) -> TJSON:
	"""Parses JSON-encoded text."""
	return cast(TJSON, basejson.loads(value))


# EOF
