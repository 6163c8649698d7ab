import pytest

import core.retry as retry_mod


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def sleeps(monkeypatch):
    """Replace the retry backoff sleep and collect requested delays (seconds)."""
    calls = []

    async def fake_sleep(seconds: float):
        calls.append(seconds)

    monkeypatch.setattr(retry_mod.asyncio, "sleep", fake_sleep)
    return calls
