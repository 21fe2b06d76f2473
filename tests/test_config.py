"""
Tests for config file loading and README file helpers.
"""

import json

import pytest

from contributions_updater.config import load_ignored_repos, parse_repo_list, resolve_readme_path
from contributions_updater.services.readme_service import load_readme, save_readme


def test_ignored_repos_are_normalized(tmp_path):
    path = tmp_path / "repo_ignore_list.json"
    path.write_text(json.dumps([" Dotfiles ", "blog", "", 42]), encoding="utf-8")

    assert load_ignored_repos(str(path)) == {"dotfiles", "blog", "42"}


def test_missing_ignore_list_is_empty(tmp_path, capsys):
    assert load_ignored_repos(str(tmp_path / "absent.json")) == set()
    assert capsys.readouterr().err == ""


def test_invalid_ignore_list_warns_and_is_empty(tmp_path, capsys):
    path = tmp_path / "repo_ignore_list.json"
    path.write_text("[not json", encoding="utf-8")

    assert load_ignored_repos(str(path)) == set()
    assert "WARNING: ignoring unreadable config file" in capsys.readouterr().err


def test_non_list_ignore_list_is_empty(tmp_path):
    path = tmp_path / "repo_ignore_list.json"
    path.write_text(json.dumps({"blog": True}), encoding="utf-8")

    assert load_ignored_repos(str(path)) == set()


def test_parse_repo_list():
    assert parse_repo_list(" A, b ,,C ") == {"a", "b", "c"}
    assert parse_repo_list("") == set()


def test_resolve_readme_path(monkeypatch, tmp_path):
    monkeypatch.delenv("README_PATH", raising=False)
    absolute = str(tmp_path / "PROFILE.md")

    assert resolve_readme_path(absolute) == absolute
    assert resolve_readme_path("docs/README.md").endswith("docs/README.md")


def test_readme_is_written_and_read_as_utf8(tmp_path):
    path = str(tmp_path / "README.md")

    save_readme(path, "⭐ 1.0k\n")

    assert load_readme(path) == "⭐ 1.0k\n"


def test_missing_readme_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_readme(str(tmp_path / "absent.md"))
