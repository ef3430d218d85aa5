"""Shared fixtures for kurdemy tests."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point the user config directory at a temporary home for every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.upper().startswith("KURDEMY_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def nextjs_options():
    """A fully valid configuration for the current schema."""
    return {
        "frontend": "nextjs",
        "package_manager": "npm",
        "trpc": True,
        "auth": True,
        "tailwind": True,
    }


@pytest.fixture
def legacy_options():
    """A fully valid configuration for the legacy schema."""
    return {
        "frontend": "nextjs",
        "database": "postgresql",
        "orm": "prisma",
        "package_manager": "yarn",
        "trpc": False,
        "auth": False,
        "tailwind": False,
    }
