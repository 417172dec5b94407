"""Shared test doubles and fixture pages."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.client import LibOgame
from core.domain.models import ReturnCode

FIXTURES = Path(__file__).parent / "fixtures"

LANDING_URL = "https://en.ogame.example/"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeTransport:
    """In-memory `Transport`: replays queued `(code, body)` answers in order
    and records every request it was asked to run."""

    def __init__(self, *answers: tuple[ReturnCode, str | None]) -> None:
        self._answers = list(answers)
        self._url: str | None = None
        self._post_data: dict[str, str] = {}
        self.returned_data: str | None = None
        self.requests: list[tuple[str | None, dict[str, str]]] = []
        self.closed = False

    def queue(self, code: ReturnCode, body: str | None = None) -> None:
        self._answers.append((code, body))

    def set_url(self, url: str) -> None:
        self._url = url

    def add_post_data(self, key: str, value: str) -> None:
        self._post_data[key] = value

    def run_request(self) -> ReturnCode:
        self.requests.append((self._url, self._post_data))
        self._post_data = {}
        if not self._answers:
            raise AssertionError("unexpected request: no answer queued")
        code, body = self._answers.pop(0)
        self.returned_data = body if code is ReturnCode.SUCCESS else None
        return code

    def close(self) -> None:
        self.closed = True


class RecordingSink:
    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []

    def println(self, tag: str, message: str) -> None:
        self.lines.append((tag, message))


@pytest.fixture
def landing_html() -> str:
    return load_fixture("landing.html")


@pytest.fixture
def game_html() -> str:
    return load_fixture("game.html")


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def transport(landing_html: str) -> FakeTransport:
    return FakeTransport((ReturnCode.SUCCESS, landing_html))


@pytest.fixture
def client(transport: FakeTransport, sink: RecordingSink) -> LibOgame:
    return LibOgame(LANDING_URL, transport=transport, log_sink=sink)
