"""Tests for the RFC tools served over MCP."""

from __future__ import annotations

import pytest

from rfcs.errors import ConfigError
from rfcs.server import build_tools_dispatch
from rfcs.tools import rfc_tools


@pytest.fixture
def repo(make_repo, monkeypatch):
    path = make_repo(files=["001.md", "001-duplicate.txt", "drafts/rfc_5.org"], branches=["002-draft"])
    monkeypatch.setenv("RFCS_GIT_REPO", str(path))
    return path


def test_dispatch_registers_all_tools():
    assert set(build_tools_dispatch()) == {"rfc_list", "rfc_next_identifier", "rfc_create", "config_dump"}


def test_rfc_list(repo):
    result = rfc_tools.rfc_list(include_branches=True)

    assert result["repo_path"] == str(repo)
    assert result["documents"] == [
        {"path": "001-duplicate.txt", "identifier": "001"},
        {"path": "001.md", "identifier": "001"},
        {"path": "drafts/rfc_5.org", "identifier": "5"},
    ]
    assert result["branches"] == [{"name": "002-draft", "identifier": "002"}]
    assert result["ambiguous"] == {"001": ["001-duplicate.txt", "001.md"]}


def test_rfc_list_without_branches(repo):
    assert "branches" not in rfc_tools.rfc_list()


def test_rfc_next_identifier(repo):
    assert rfc_tools.rfc_next_identifier() == {"identifier": 3, "prefix": "003"}


def test_rfc_create(repo, run_git):
    result = rfc_tools.rfc_create("Tool made")

    assert result["branch_name"] == "003-Tool-made"
    assert result["created"] is True
    assert result["current_branch"] == "003-Tool-made"
    assert run_git(repo, "symbolic-ref", "--short", "HEAD") == "003-Tool-made"


def test_rfc_create_dry_run(repo, run_git):
    result = rfc_tools.rfc_create("Tool made", dry_run=True)

    assert result["branch_name"] == "003-Tool-made"
    assert result["created"] is False
    assert run_git(repo, "symbolic-ref", "--short", "HEAD") == "main"


def test_config_dump(repo, tmp_path, monkeypatch):
    monkeypatch.setenv("RFCS_CONFIG_DIR", str(tmp_path / "cfg"))

    result = rfc_tools.config_dump()

    assert result["config_path"] == str(tmp_path / "cfg" / "config.yaml")
    assert result["git"] == {"repo": str(repo), "url": None}


def test_tools_report_configuration_errors(mocker):
    mocker.patch.dict("os.environ", {"RFCS_GIT_REPO": ""})
    with pytest.raises(ConfigError):
        rfc_tools.rfc_next_identifier()
