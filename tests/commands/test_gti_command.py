"""Tests for the gti command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from gti.cli.cli import cli
from gti.core.context import GtiContext
from gti.gateway.git_installation.abc import GitProbe
from tests.fakes.git_installation import FakeGitInstallation


def _has_git_ancestor(path: Path) -> bool:
    return any((p / ".git").exists() for p in [path, *path.parents])


def test_gti_creates_sidecar_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=GtiContext.for_test())

    assert result.exit_code == 0, result.output
    assert result.output == ""
    assert (tmp_path / ".git" / "x-gti-info").is_dir()


def test_gti_twice_reuses_sidecar_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    first = runner.invoke(cli, [], obj=GtiContext.for_test())
    second = runner.invoke(cli, [], obj=GtiContext.for_test())

    assert first.exit_code == 0
    assert second.exit_code == 0
    assert [p.name for p in (tmp_path / ".git").iterdir()] == ["x-gti-info"]


def test_gti_git_not_installed(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    git = FakeGitInstallation(probe_result=GitProbe.NOT_INSTALLED)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=GtiContext.for_test(git=git))

    assert result.exit_code == 1
    assert result.output == "gti: git is not installed\n"
    assert not (tmp_path / ".git" / "x-gti-info").exists()


def test_gti_git_validation_failed(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    git = FakeGitInstallation(probe_result=GitProbe.FAILED)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=GtiContext.for_test(git=git))

    assert result.exit_code == 1
    assert result.output == "gti: could not validate git installation; version check failed\n"


def test_gti_outside_repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    if _has_git_ancestor(tmp_path):
        pytest.skip("temporary directory is inside a git repository")
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=GtiContext.for_test())

    assert result.exit_code == 1
    assert result.output == "gti: git directory not found\n"


def test_gti_git_file_reports_os_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A `.git` file is found but the sidecar cannot be created inside it."""
    (tmp_path / ".git").write_text("gitdir: /elsewhere\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    result = runner.invoke(cli, [], obj=GtiContext.for_test())

    assert result.exit_code == 1
    assert result.output.startswith("gti: ")


def test_gti_rejects_positional_arguments() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["status"], obj=GtiContext.for_test())

    assert result.exit_code == 2


def test_gti_help() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "--debug" in result.output
