"""Shared fixtures: a small project tree on disk and a fake chat client."""
from dataclasses import dataclass, field
from typing import Any

import pytest


@dataclass
class FakeChatClient:
    """Records calls to complete() and replies with a canned answer or error."""

    reply: str = "looks fine"
    label: str = "OpenAI"
    error: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def complete(self, model, messages):
        self.calls.append({"model": model, "messages": messages})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_client():
    return FakeChatClient()


@pytest.fixture
def sample_project(tmp_path):
    """
    tmp_path/
      package.json, .env, package-lock.json, notes.txt
      src/test.js, src/test.py, src/test.tsx, src/data.json, src/readme.txt
      src/lib/util.py
      node_modules/ignored.js
      .git/config
    """
    (tmp_path / "src" / "lib").mkdir(parents=True)
    (tmp_path / "node_modules").mkdir()
    (tmp_path / ".git").mkdir()

    (tmp_path / "package.json").write_text('{"name": "test"}')
    (tmp_path / ".env").write_text("API_KEY=secret")
    (tmp_path / "package-lock.json").write_text("{}")
    (tmp_path / "notes.txt").write_text("top level notes")
    (tmp_path / "src" / "test.js").write_text('console.log("hello");')
    (tmp_path / "src" / "test.py").write_text('print("hello")')
    (tmp_path / "src" / "test.tsx").write_text("export default function() {}")
    (tmp_path / "src" / "data.json").write_text('{"test": true}')
    (tmp_path / "src" / "readme.txt").write_text("This should be ignored")
    (tmp_path / "src" / "lib" / "util.py").write_text("def util():\n    return 1\n")
    (tmp_path / "node_modules" / "ignored.js").write_text("ignored")
    (tmp_path / ".git" / "config").write_text("[core]")
    return tmp_path
