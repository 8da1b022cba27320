from datetime import datetime, timedelta, timezone

import httpx
import pytest

from project_engine.config import Settings
from project_engine.repositories import InMemoryStorage
from project_engine.services.generation_client import GenerationClient
from project_engine.services.project_store import ProjectStore
from project_engine.services.snapshot import SnapshotService
from project_engine.services.website_generator import WebsiteGenerator

SITE_REPLY = (
    "[FILES]"
    "FILENAME: index.html\nCODE: <html><head></head><body><button>Go</button></body></html>\n"
    "FILENAME: style.css\nCODE: button { color: red; }\n"
    "FILENAME: script.js\nCODE: console.log('hi');\n"
    "[TALK] Added a red button [END]"
)


class FakeClock:
    """Returns a fixed start time advanced by one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


class ReplyTransport(httpx.MockTransport):
    """Mock transport answering each request with the next queued reply."""

    def __init__(self, replies: list[httpx.Response | str]):
        self.replies = list(replies)
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0)
        if isinstance(reply, str):
            return httpx.Response(200, text=reply)
        return reply


@pytest.fixture
def settings() -> Settings:
    return Settings(
        storage_backend="memory",
        generation_api_url="https://text.example.test",
        image_api_url="https://image.example.test",
        snapshot_enabled=False,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage, clock) -> ProjectStore:
    return ProjectStore(storage, clock=clock)


@pytest.fixture
def make_generator(settings):
    def _make(replies: list[httpx.Response | str]) -> tuple[WebsiteGenerator, ReplyTransport]:
        transport = ReplyTransport(replies)
        generator = WebsiteGenerator(
            settings,
            client=GenerationClient(settings, transport=transport),
            snapshots=SnapshotService(settings),
        )
        return generator, transport

    return _make
