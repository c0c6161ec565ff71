"""
Shared test fixtures for shellquote tests.
"""

import os
import shutil
import subprocess

import pytest
import structlog

import shellquote.core.config as config_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/env config and logging state out of every test."""
    monkeypatch.setattr(config_module, "USER_CONFIG", tmp_path / "no-user-config.toml")
    monkeypatch.delenv(config_module.ENV_CONFIG, raising=False)
    yield
    config_module.configure_logging(config_module.Config())
    structlog.reset_defaults()


def _shell_env() -> dict[str, str]:
    env = dict(os.environ)
    env["LC_ALL"] = "C"
    return env


@pytest.fixture
def shell_eval():
    """Return a function that makes a real shell print one quoted word.

    shell_eval(shell, quoted) runs `printf %s <quoted>` and returns the
    bytes printf received. Skips the test if the shell is not installed.
    """

    def _eval(shell: str, quoted: bytes) -> bytes:
        path = shutil.which(shell)
        if path is None:
            pytest.skip(f"{shell} not installed")
        result = subprocess.run(
            [path, "-c", b"printf %s " + quoted],
            capture_output=True,
            env=_shell_env(),
            timeout=10,
        )
        assert result.returncode == 0, result.stderr
        return result.stdout

    return _eval


@pytest.fixture
def word_count():
    """Return a function that counts the words bashlex sees after printf."""
    bashlex = pytest.importorskip("bashlex")

    def _count(quoted: str) -> int:
        parts = bashlex.parse(f"printf {quoted}")
        assert len(parts) == 1
        assert parts[0].kind == "command"
        return len([p for p in parts[0].parts if p.kind == "word"]) - 1

    return _count
