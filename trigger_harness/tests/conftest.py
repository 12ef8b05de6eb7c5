import pytest

from trigger_harness import lifecycle, runtime_config
from trigger_harness.models.trigger import RegisteredHandler, TriggerMetadata


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch):
    """Each test starts without mocked config or an active session."""
    monkeypatch.delenv("CLOUD_RUNTIME_CONFIG", raising=False)
    monkeypatch.delenv("STRICT_PARAMS", raising=False)
    yield
    runtime_config.clear_config()
    lifecycle._active = None


@pytest.fixture
def make_handler():
    """Build a handler that echoes its inputs, registered on ref/{wildcard}/nested/{anotherWildcard}."""

    def _make(event_type: str = "event") -> RegisteredHandler:
        return RegisteredHandler(
            run=lambda data, context: {"data": data, "context": context},
            trigger=TriggerMetadata(
                resource_template="ref/{wildcard}/nested/{anotherWildcard}",
                service="service",
                event_type=event_type,
            ),
        )

    return _make
