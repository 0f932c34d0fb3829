from __future__ import annotations

from pathlib import Path

import pytest

from media_backend.utils import env as mod


def test_env_str_strips_and_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MB_TEST_VALUE", "  hello ")
    monkeypatch.setenv("MB_TEST_BLANK", "   ")
    monkeypatch.delenv("MB_TEST_MISSING", raising=False)

    assert mod.env_str("MB_TEST_VALUE") == "hello"
    assert mod.env_str("MB_TEST_BLANK", "fallback") == "fallback"
    assert mod.env_str("MB_TEST_MISSING") is None


def test_load_env_reads_dotenv_from_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    repo_root = Path(mod.__file__).resolve().parents[2]
    if (repo_root / ".env").is_file():
        pytest.skip("repo .env takes precedence over cwd")

    (tmp_path / ".env").write_text("MB_TEST_FROM_DOTENV=yes\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MB_TEST_FROM_DOTENV", "")
    monkeypatch.delenv("MB_TEST_FROM_DOTENV")

    loaded = mod.load_env()
    assert loaded is not None
    assert loaded.resolve() == (tmp_path / ".env").resolve()
    assert mod.env_str("MB_TEST_FROM_DOTENV") == "yes"
