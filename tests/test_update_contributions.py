"""
Tests for the update_contributions command-line entry point.
"""

from unittest.mock import patch

import pytest
import requests

import update_contributions


def test_missing_token_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        update_contributions.main(["--username", "me"])

    assert excinfo.value.code == 2
    assert "GITHUB_TOKEN" in capsys.readouterr().err


@patch("update_contributions.run_update")
def test_flags_are_passed_to_config(mock_run_update, monkeypatch, tmp_path):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    readme = tmp_path / "README.md"

    code = update_contributions.main(
        [
            "--token", "t0k3n",
            "-u", "me",
            "--readme", str(readme),
            "--exclude-personal-repos", "dotfiles,Blog",
            "--window-years", "5",
            "--dry-run",
        ]
    )

    assert code == 0
    config = mock_run_update.call_args.args[0]
    assert config.github_token == "t0k3n"
    assert config.github_username == "me"
    assert config.readme_path == str(readme)
    assert {"dotfiles", "blog"} <= config.excluded_repos
    assert config.active_window_years == 5
    assert config.dry_run is True


@patch("update_contributions.run_update", side_effect=requests.ConnectionError("offline"))
def test_transport_fault_exits_with_error(mock_run_update, monkeypatch, capsys):
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")

    assert update_contributions.main(["--username", "me"]) == 1
    assert "ERROR: GitHub request failed: offline" in capsys.readouterr().err
