"""Tests for exit code mapping."""

from samoyed.core.exit_codes import SamoyedError, exit_code_for
from samoyed.hooks.install import HookIOError
from samoyed.vcs.git_config import (
    CommandNotFoundError,
    ConfigurationFailedError,
    NotGitRepositoryError,
    PermissionDeniedError,
)
from samoyed.wrappers.dispatch import HomeDirectoryError, NoHookNameError, ShellSpawnError


def test_error_classes_carry_their_exit_code():
    """Test each error reports its sysexits code."""
    assert exit_code_for(NotGitRepositoryError("/tmp/x")) == 66
    assert exit_code_for(CommandNotFoundError("linux")) == 69
    assert exit_code_for(ConfigurationFailedError("bad config line 1")) == 78
    assert exit_code_for(PermissionDeniedError("set Git configuration")) == 77
    assert exit_code_for(HookIOError(OSError("disk full"))) == 74
    assert exit_code_for(NoHookNameError()) == 64
    assert exit_code_for(ShellSpawnError("sh", "x", OSError(2, "nope"))) == 69
    assert exit_code_for(HomeDirectoryError()) == 78


def test_lock_contention_is_tempfail():
    """Test a config lock failure is retryable."""
    error = ConfigurationFailedError("error: could not lock config file .git/config: File exists")
    assert error.exit_code == 75


def test_fallback_codes():
    """Test unclassified and OS errors map to 70 and 74."""
    assert exit_code_for(SamoyedError("boom")) == 70
    assert exit_code_for(OSError("io")) == 74
    assert exit_code_for(ValueError("other")) == 70


def test_describe_includes_suggestion():
    """Test describe() appends the suggestion when present."""
    error = SamoyedError("Something failed", "Try again")
    assert error.describe() == "Something failed\n\nTry again"
    assert SamoyedError("Only message").describe() == "Only message"
