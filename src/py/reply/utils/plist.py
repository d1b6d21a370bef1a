import plistlib
from datetime import datetime
from typing import Any
from .json import InvalidValue
from .. import config

# The XML property list format stores integers on 64 bits, unsigned values
# are accepted up to 2**64.
PLIST_INT_MIN: int = -(1 << 63)
PLIST_INT_MAX: int = (1 << 64) - 1


def validate(value: Any, path: tuple[str | int, ...] = (), *, seen: set[int] | None = None) -> None:
	"""Ensures that `value` is a property list node: dicts with `str` keys,
	lists, tuples, strings, ints, floats, booleans, bytes and datetimes. There
	is no null in property lists."""
	if isinstance(value, (bool, str, float, bytes, bytearray, datetime)):
		return None
	elif isinstance(value, int):
		if not PLIST_INT_MIN <= value <= PLIST_INT_MAX:
			raise InvalidValue(f"Integer out of range {value}", path)
		return None
	elif value is None:
		raise InvalidValue("Null value", path)
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


def plist(value: Any) -> str:
	"""Serializes an already validated value as an XML property list."""
	return plistlib.dumps(value, fmt=plistlib.FMT_XML, sort_keys=True).decode(
		config.DEFAULT_ENCODING
	)


def unplist(value: bytes | str) -> Any:
	return plistlib.loads(
		value.encode(config.DEFAULT_ENCODING) if isinstance(value, str) else value,
		fmt=plistlib.FMT_XML,
	)


# EOF
