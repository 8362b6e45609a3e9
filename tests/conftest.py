"""Shared fixtures for fieldcache tests."""

from dataclasses import dataclass, field

import pytest

from kungfu import Some

from fieldcache import cache as C


@dataclass
class FakeClock:
    now: float = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class RecordingLogger:
    messages: list[str] = field(default_factory=list)

    def debug(self, msg: str, /, *args: object) -> None:
        self.messages.append(msg % args if args else msg)


@dataclass
class CountingResolve:
    """Resolve operation that records how often it was called."""

    value: object
    calls: int = 0

    def __call__(self) -> object:
        self.calls += 1
        return self.value


class SpyStore(C.MemoryStore):
    """MemoryStore that remembers every write."""

    def __init__(self, clock: FakeClock) -> None:
        super().__init__(clock=clock)
        self.writes: list[tuple[str, object, object]] = []

    def write(self, key, document, expires_in):
        self.writes.append((key, document, expires_in))
        super().write(key, document, expires_in)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SpyStore(clock)


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def context(store, logger):
    return C.CacheContext(store=store, logger=logger, expiry=300)


@pytest.fixture(autouse=True)
def reset_process_context():
    """configure() is process-wide; restore a fresh default after each test."""
    yield
    C.configure()


MISSING = object()


@pytest.fixture
def peek(store):
    """Stored document for key, or MISSING."""

    def _peek(key: str) -> object:
        match store.read(key):
            case Some(document):
                return document
            case _:
                return MISSING

    return _peek
