"""Rendering of response bodies."""

import json
import math
import plistlib
from datetime import datetime

import pytest

from reply.http.body import (
	Html,
	Json,
	Plist,
	Raw,
	RenderFailure,
	ResponseBody,
	Xml,
)


def test_json_renders_pretty_printed_with_content_type() -> None:
	value = {"name": "reply", "tags": ["http", "json"], "count": 2, "ok": True, "none": None}
	text, content_type = Json(value).render()

	assert content_type == "application/json"
	assert text is not None
	assert json.loads(text) == value
	assert "\n" in text


def test_json_accepts_scalars_and_tuples() -> None:
	assert Json(1.5).render() == ("1.5", "application/json")
	text, content_type = Json((1, 2)).render()
	assert content_type == "application/json"
	assert json.loads(text or "") == [1, 2]


@pytest.mark.parametrize(
	"value",
	[
		{1: "non-string key"},
		{"set": {1, 2}},
		[object()],
		{"nan": math.nan},
		[math.inf],
	],
)
def test_json_invalid_values_render_a_diagnostic(value: object) -> None:
	text, content_type = Json(value).render()

	assert content_type is None
	assert text and text.startswith("Invalid object to serialise")


def test_json_cyclic_value_renders_a_diagnostic() -> None:
	value: dict = {"a": []}
	value["a"].append(value)
	rendered = Json(value).rendered()

	assert rendered.contentType is None
	assert rendered.text and "Cyclic reference" in rendered.text
	assert rendered.error is not None
	assert rendered.error.failure is RenderFailure.Validation


def test_json_shared_subtrees_are_not_cycles() -> None:
	shared = [1, 2]
	text, content_type = Json({"a": shared, "b": shared}).render()

	assert content_type == "application/json"
	assert json.loads(text or "") == {"a": [1, 2], "b": [1, 2]}


def test_json_serialization_error_keeps_the_cause() -> None:
	# Passes validation, but is too large to be converted to text
	rendered = Json(10 ** 5000).rendered()

	assert rendered.contentType is None
	assert rendered.text and rendered.text.startswith("Serialisation error: ")
	assert rendered.error is not None
	assert rendered.error.failure is RenderFailure.Serialization
	assert isinstance(rendered.error.cause, ValueError)


def test_xml_is_not_supported() -> None:
	rendered = Xml({"a": 1}).rendered()

	assert rendered.text == "XML serialization not supported."
	assert rendered.contentType is None
	assert rendered.error is not None
	assert rendered.error.failure is RenderFailure.Unsupported


def test_plist_renders_xml_property_list() -> None:
	value = {
		"name": "reply",
		"items": [1, 2.5, True],
		"data": b"\x00\x01",
		"at": datetime(2024, 1, 2, 3, 4, 5),
	}
	text, content_type = Plist(value).render()

	assert content_type == "application/plist"
	assert text is not None
	assert text.startswith("<?xml")
	assert plistlib.loads(text.encode("utf8")) == value


@pytest.mark.parametrize(
	"value",
	[{"a": None}, {1: "key"}, [1 << 64], {"o": object()}],
)
def test_plist_invalid_values_render_a_diagnostic(value: object) -> None:
	rendered = Plist(value).rendered()

	assert rendered.contentType is None
	assert rendered.text and rendered.text.startswith("Invalid object to serialise")
	assert rendered.error is not None
	assert rendered.error.failure is RenderFailure.Validation


def test_html_is_wrapped_in_a_document() -> None:
	assert Html("hi").render() == ("<html><body>hi</body></html>", "text/html")
	assert Html("").render() == ("<html><body></body></html>", "text/html")


def test_html_is_not_escaped() -> None:
	# Escaping is the caller's responsibility
	text, _ = Html("<script>alert(1)</script>").render()
	assert text == "<html><body><script>alert(1)</script></body></html>"


def test_raw_is_rendered_verbatim() -> None:
	assert Raw("abc").render() == ("abc", "application/octet-stream")
	assert Raw("").render() == ("", "application/octet-stream")


def test_text_bodies_require_str() -> None:
	with pytest.raises(TypeError):
		Html(b"bytes")  # type: ignore[arg-type]
	with pytest.raises(TypeError):
		Raw(1)  # type: ignore[arg-type]


def test_rendering_is_idempotent_and_does_not_mutate() -> None:
	value = {"b": [1, {"c": "d"}], "a": "x"}
	snapshot = json.dumps(value)
	body = Json(value)

	assert body.render() == body.render()
	assert json.dumps(value) == snapshot


def test_variants_are_reachable_from_response_body() -> None:
	assert ResponseBody.Json is Json
	assert ResponseBody.Xml is Xml
	assert ResponseBody.Plist is Plist
	assert ResponseBody.Html is Html
	assert ResponseBody.Raw is Raw
	assert isinstance(Html("a"), ResponseBody)


def test_bodies_are_immutable() -> None:
	body = Raw("abc")
	with pytest.raises(AttributeError):
		body.text = "def"  # type: ignore[misc]


def test_soft_failures_are_logged(logs) -> None:
	Xml(None).render()
	assert "XML serialization not supported." in logs.getvalue()
