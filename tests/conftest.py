"""
Pytest configuration for the contributions updater tests.
"""

import pytest

from contributions_updater.models import UpdateConfig


@pytest.fixture
def config(tmp_path):
    """UpdateConfig for the user 'me' pointing at a scratch README."""
    return UpdateConfig(
        github_username="me",
        github_token="fake_github_token",
        active_window_years=2,
        excluded_repos=set(),
        readme_path=str(tmp_path / "README.md"),
    )
