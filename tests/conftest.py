"""
Pytest configuration for password-policy tests
"""

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings file at a temporary path for every test"""
    path = tmp_path / "config" / "password_policy.json"
    monkeypatch.setenv("PASSWORD_POLICY_SETTINGS", str(path))
    return path
