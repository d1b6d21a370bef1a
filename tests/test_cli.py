"""The `reply` command line."""

import json
from io import BytesIO
from pathlib import Path

from reply.__main__ import main


def run(*args: str) -> tuple[int, bytes]:
	out = BytesIO()
	status = main(list(args), output=out)
	return status, out.getvalue()


def test_renders_json_file(tmp_path: Path) -> None:
	path = tmp_path / "data.json"
	path.write_text(json.dumps({"a": [1, 2]}))
	status, data = run(str(path))

	assert status == 0
	head, _, body = data.partition(b"\r\n\r\n")
	assert head.startswith(b"HTTP/1.1 200 OK")
	assert b"Content-Type: application/json" in head
	assert json.loads(body) == {"a": [1, 2]}


def test_renders_html_head_only(tmp_path: Path) -> None:
	path = tmp_path / "page.html"
	path.write_text("<p>hi</p>")
	status, data = run("--type", "html", "--head", str(path))

	assert status == 0
	assert b"Content-Type: text/html" in data
	assert data.endswith(b"\r\n\r\n")


def test_raw_status(tmp_path: Path) -> None:
	path = tmp_path / "payload.bin"
	path.write_bytes(b"\x00\x01")
	status, data = run("--status", "299", str(path))

	assert status == 0
	assert data.startswith(b"HTTP/1.1 299 Custom\r\n")
	assert data.endswith(b"\r\n\r\n\x00\x01")


def test_invalid_json_fails(tmp_path: Path, logs) -> None:
	path = tmp_path / "bad.json"
	path.write_text("{not json")
	status, data = run(str(path))

	assert status == 1
	assert data == b""
	assert "can't be used as a body" in logs.getvalue()


def test_missing_file_fails(tmp_path: Path, logs) -> None:
	status, _ = run(str(tmp_path / "missing.json"))
	assert status == 1
	assert "Could not read" in logs.getvalue()
