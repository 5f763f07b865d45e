import pytest

from yield_tasks.config import reset_runtime_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    monkeypatch.delenv("YIELD_TASKS_LOG_LEVEL", raising=False)
    reset_runtime_config()
    yield
    reset_runtime_config()
