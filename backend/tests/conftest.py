import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("ASSISTANT_THINKING_DELAY_SEC", "0")


@pytest.fixture
def store():
    from portfolio.highlight.state import HighlightStore

    return HighlightStore()


class FakeCompletions:
    def __init__(self, content=None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error

        class _Msg:
            content = self.content

        class _Choice:
            message = _Msg()

        class _Response:
            choices = [_Choice()]

        return _Response()


class FakeOpenAIClient:
    def __init__(self, content=None, error: Exception | None = None):
        self.completions = FakeCompletions(content=content, error=error)

        class _Chat:
            completions = self.completions

        self.chat = _Chat()


@pytest.fixture
def fake_openai():
    return FakeOpenAIClient
