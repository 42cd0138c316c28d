from __future__ import annotations

import os
from pathlib import Path

import pytest

from skripta_cv.config import default_settings
from skripta_cv.layout.canvas import Canvas
from skripta_cv.models import ProfileData, UserProfile
from skripta_cv.services import get_sample_profile


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's SKRIPTA_CV_* variables and .env file out of the tests."""
    for key in list(os.environ):
        if key.startswith("SKRIPTA_CV_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def canvas() -> Canvas:
    """A fresh A4 canvas with the built-in settings."""
    return Canvas(default_settings())


@pytest.fixture
def full_profile() -> ProfileData:
    return get_sample_profile("full")


@pytest.fixture
def minimal_profile() -> ProfileData:
    """A profile with a name and nothing else."""
    return ProfileData(user=UserProfile(full_name="Minimal Person"))
