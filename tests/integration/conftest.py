"""Fixtures for tests that run the real git executable."""

import shutil
import subprocess
from pathlib import Path

import pytest


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Initialize a fresh git repository and make it the working directory.

    Returns:
        Path to the repository root
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo = tmp_path / "env"
    repo.mkdir()
    subprocess.run(["git", "init"], cwd=repo, stdout=subprocess.DEVNULL, check=True)
    monkeypatch.chdir(repo)
    return repo
