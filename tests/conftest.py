import pytest

import histview


class RecordingBridge(histview.ShellBridge):
    """Collects bridge calls instead of talking to a shell."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    def place_in_edit_buffer(self, text: str) -> None:
        self.calls.append(("edit", text))

    def execute_immediately(self, text: str) -> None:
        self.calls.append(("execute", text))


@pytest.fixture
def bridge():
    return RecordingBridge()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("HISTVIEW_LIMIT", "HISTVIEW_FZF", "HISTVIEW_FZF_OPTS", "HISTVIEW_PREVIEW"):
        monkeypatch.delenv(name, raising=False)
