import pytest

from balance_override.registry import default_registry


class RecordingTransport:
    """Stands in for JsonRpcTransport; records calls and replays canned results."""

    def __init__(self, results=None):
        self.calls = []
        self.results = dict(results or {})

    def send(self, method, params=None):
        self.calls.append((method, params or []))
        result = self.results.get(method)
        if isinstance(result, Exception):
            raise result
        if callable(result):
            return result(params)
        return result

    def methods(self):
        return [m for m, _ in self.calls]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def account():
    return "0x" + "ab" * 20
