"""Tests for git repository detection and core.hooksPath configuration."""

import pytest

from samoyed.vcs.git_config import (
    CommandNotFoundError,
    ConfigurationFailedError,
    GitConfigurator,
    NotGitRepositoryError,
    PermissionDeniedError,
    analyze_git_config_error,
    check_git_repository,
)


def test_check_repository_with_git_directory(git_repo_fs, runner):
    """Test a .git directory is accepted."""
    GitConfigurator(runner, git_repo_fs).check_repository()


def test_check_repository_accepts_git_file(fs, runner):
    """Test worktrees (a .git file) count as repositories."""
    fs.with_file(".git", "gitdir: /elsewhere/.git/worktrees/x")
    GitConfigurator(runner, fs).check_repository()


def test_check_repository_outside_repo(fs):
    """Test a missing .git raises NotGitRepositoryError with an init hint."""
    with pytest.raises(NotGitRepositoryError) as exc:
        check_git_repository(fs)
    assert exc.value.exit_code == 66
    assert "git init" in exc.value.describe()


def test_set_hooks_path_runs_git_config(git_repo_fs, runner):
    """Test git is checked for and then configured."""
    GitConfigurator(runner, git_repo_fs).set_hooks_path(".samoyed/_")

    assert runner.calls[0][:2] == ("git", ["--version"])
    assert runner.calls[1][:2] == ("git", ["config", "core.hooksPath", ".samoyed/_"])


def test_set_hooks_path_git_missing(git_repo_fs, runner):
    """Test an unspawnable git raises CommandNotFoundError."""
    runner.failing_spawn("git")

    with pytest.raises(CommandNotFoundError) as exc:
        GitConfigurator(runner, git_repo_fs).set_hooks_path(".samoyed/_")
    assert exc.value.exit_code == 69
    assert "not found" in exc.value.message


def test_set_hooks_path_git_broken(git_repo_fs, runner):
    """Test a failing `git --version` is treated as git missing."""
    runner.with_response("git", returncode=1, args_prefix=["--version"])

    with pytest.raises(CommandNotFoundError):
        GitConfigurator(runner, git_repo_fs).set_hooks_path(".samoyed/_")


def test_set_hooks_path_permission_denied(git_repo_fs, runner):
    """Test permission failures map to PermissionDeniedError."""
    runner.with_response(
        "git",
        returncode=255,
        stderr="error: opening .git/config: Permission denied",
        args_prefix=["config"],
    )

    with pytest.raises(PermissionDeniedError) as exc:
        GitConfigurator(runner, git_repo_fs).set_hooks_path(".samoyed/_")
    assert exc.value.exit_code == 77


def test_set_hooks_path_lock_contention(git_repo_fs, runner):
    """Test a locked config file is a retryable failure."""
    runner.with_response(
        "git",
        returncode=255,
        stderr="error: could not lock config file .git/config: File exists",
        args_prefix=["config"],
    )

    with pytest.raises(ConfigurationFailedError) as exc:
        GitConfigurator(runner, git_repo_fs).set_hooks_path(".samoyed/_")
    assert exc.value.exit_code == 75
    assert "Another Git process" in exc.value.suggestion


def test_set_hooks_path_other_failure(git_repo_fs, runner):
    """Test other git config failures keep git's message."""
    runner.with_response("git", returncode=3, stderr="fatal: bad config line 4", args_prefix=["config"])

    with pytest.raises(ConfigurationFailedError) as exc:
        GitConfigurator(runner, git_repo_fs).set_hooks_path(".samoyed/_")
    assert exc.value.exit_code == 78
    assert "bad config line 4" in exc.value.message


def test_analyze_unknown_error():
    """Test unrecognised git errors get no suggestion."""
    assert analyze_git_config_error("something odd") is None
