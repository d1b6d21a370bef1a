"""Shared pytest fixtures."""

from io import StringIO

import pytest

from reply.utils.logging import Logger, LogLevel


@pytest.fixture()
def logs(monkeypatch: pytest.MonkeyPatch) -> StringIO:
	"""Captures the log output, at every level."""
	stream = StringIO()
	monkeypatch.setattr(Logger, "Stream", stream)
	monkeypatch.setattr(Logger, "Level", LogLevel.Debug)
	return stream
