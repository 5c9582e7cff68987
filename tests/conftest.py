import pytest


class FakeLog:
    def __init__(self):
        self.lines = []

    def info(self, message):
        self.lines.append(("info", message))

    def warn(self, message):
        self.lines.append(("warn", message))

    def error(self, message):
        self.lines.append(("error", message))


class FakeNotify:
    def __init__(self):
        self.messages = []

    async def all(self, message):
        self.messages.append(message)


class FakeStore:
    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value


class FakeContext:
    """In-memory stand-in for the host skill context."""

    def __init__(self, **overrides):
        self.config = {
            "localModel": "qwen2.5:7b",
            "requireConfirmationForCode": True,
            "confirmationPhrase": "CONFIRM LOCAL",
            "cooldownMinutes": 30,
            **overrides,
        }
        self.log = FakeLog()
        self.notify = FakeNotify()
        self.state = FakeStore()


@pytest.fixture
def make_ctx():
    return FakeContext


@pytest.fixture(autouse=True)
def isolated_supervisor_home(tmp_path, monkeypatch):
    """Keep log and config files out of the real home directory."""
    log_path = str(tmp_path / "llm-supervisor.log")
    config_path = str(tmp_path / "config.json")

    monkeypatch.setattr("llm_supervisor.logger.DEFAULT_LOG_PATH", log_path)
    monkeypatch.setattr("llm_supervisor.logger.DEFAULT_CONFIG_PATH", config_path)

    return {"dir": str(tmp_path), "log_path": log_path, "config_path": config_path}
