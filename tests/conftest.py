"""
Shared test fixtures and configuration for pytest
"""
from collections import deque

import pytest

from core.errors import InputClosedError


class ScriptedConsole:
    """In-memory LineConsole fed from a list of replies"""

    def __init__(self, replies):
        self.replies = deque(replies)
        self.prompts = []
        self.lines = []
        self.transcript = []

    def read_line(self, prompt=""):
        self.prompts.append(prompt)
        self.transcript.append(prompt)
        if not self.replies:
            raise InputClosedError(prompt)
        reply = self.replies.popleft()
        self.transcript.append(reply + "\n")
        return reply

    def write_line(self, text=""):
        self.lines.append(text)
        self.transcript.append(text + "\n")

    @property
    def output(self):
        return "".join(self.transcript)


@pytest.fixture
def scripted():
    """Factory for scripted consoles"""
    return ScriptedConsole


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep real .env files and FROBOTZ_* variables out of the tests"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    for key in ("SITE_NAME", "EXIT_SENTINEL", "SHOW_BANNER", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"FROBOTZ_{key}", raising=False)
    yield tmp_path
