"""Pytest configuration and fixtures for rfcs tests.

Tests run against real, throwaway git repositories created with the git CLI
in pytest's temporary directories.  Global and system git configuration is
disabled so that a developer's settings (default branch name, signing) do
not leak into the tests.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest


def git(repo: Path, *args: str) -> str:
    """Run a git command in ``repo`` and return its stdout."""
    proc = subprocess.run(
        ["git", *args],
        cwd=str(repo),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        check=True,
    )
    return proc.stdout.strip()


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path_factory):
    """Isolate configuration and git identity for every test."""
    home = tmp_path_factory.mktemp("home")
    gitconfig = home / ".gitconfig"
    gitconfig.write_text("")

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("RFCS_CONFIG_DIR", str(home / ".config" / "rfcs"))
    monkeypatch.delenv("RFCS_GIT_REPO", raising=False)
    monkeypatch.delenv("RFCS_GIT_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")

    yield

    # The CLI binds a handler to the stream that was stderr at the time
    rfcs_logger = logging.getLogger("rfcs")
    for handler in list(rfcs_logger.handlers):
        rfcs_logger.removeHandler(handler)
    rfcs_logger.propagate = True


@pytest.fixture
def run_git() -> Callable[..., str]:
    return git


@pytest.fixture
def make_repo(tmp_path) -> Callable[..., Path]:
    """Return a factory creating a git repository with RFC files and branches.

    Files are committed on ``main``; branches are created from that commit
    and ``main`` stays checked out.
    """

    def _make(
        files: Iterable[str] = (),
        branches: Iterable[str] = (),
        name: str = "rfcs",
    ) -> Path:
        repo = tmp_path / name
        repo.mkdir()
        git(repo, "init", "-b", "main")
        for rel in files:
            path = repo / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"# {rel}\n", encoding="utf-8")
        git(repo, "add", "-A")
        git(repo, "commit", "--allow-empty", "-m", "Initial commit")
        for branch in branches:
            git(repo, "branch", branch)
        return repo

    return _make


@pytest.fixture
def checkout_for(make_repo):
    """Return a factory building a ``RepositoryCheckout`` for a new repository."""
    from rfcs.repository import open_checkout

    def _checkout(files: Iterable[str] = (), branches: Iterable[str] = ()):
        return open_checkout(make_repo(files=files, branches=branches))

    return _checkout
