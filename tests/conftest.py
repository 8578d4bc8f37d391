"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from textslice import settings as settings_module
from tests.helpers import COMBINING_BREVE


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("TEXTSLICE_STRICT_UTF8", "TEXTSLICE_DEBUG_LOGGING", "TEXTSLICE_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


@pytest.fixture
def multibyte_text() -> str:
    # 1, 2, 2, 1, 2 and 2 UTF-8 bytes per character.
    return "fõøbα®"


@pytest.fixture
def sample_texts() -> list[str]:
    return [
        "",
        "foobar",
        "hello, world!",
        "fõøbα®",
        "y" + COMBINING_BREVE,
        "日本語テキスト",
        "emoji 🎉 and 𝄞 clef",
    ]
