"""Tests for the init command."""

import pytest
from conftest import FakeEnvironment

from samoyed.core.config_loader import load_config
from samoyed.core.project import ProjectType
from samoyed.hooks.init import init_command
from samoyed.hooks.validation import DirectoryTraversalError
from samoyed.vcs.git_config import NotGitRepositoryError


def test_init_creates_config_and_hooks(env, runner, git_repo_fs, capsys):
    """Test init writes samoyed.toml for the detected project and installs hooks."""
    fs = git_repo_fs.with_file("Cargo.toml")

    result = init_command(env, runner, fs)

    assert result.config_created
    assert result.project_type == ProjectType.RUST
    config = load_config(fs)
    assert config.hooks["pre-commit"] == ProjectType.RUST.default_pre_commit_command
    assert config.hooks["pre-push"] == "cargo test --release"
    assert "[settings]" not in fs.files["samoyed.toml"]
    assert fs.exists(".samoyed/_/pre-commit")

    out = capsys.readouterr().out
    assert "Created samoyed.toml with Rust defaults" in out
    assert "samoyed is ready!" in out


def test_init_with_project_type_hint(env, runner, git_repo_fs):
    """Test an explicit project type alias is honored."""
    result = init_command(env, runner, git_repo_fs, project_type_hint="golang")
    assert result.project_type == ProjectType.GO


def test_init_unknown_hint_falls_back_to_detection(env, runner, git_repo_fs, capsys):
    """Test an unknown project type warns and auto-detects."""
    fs = git_repo_fs.with_file("package.json")

    result = init_command(env, runner, fs, project_type_hint="cobol")

    assert result.project_type == ProjectType.NODE
    assert "Unknown project type 'cobol'" in capsys.readouterr().out


def test_init_custom_dirname_is_stored(env, runner, git_repo_fs):
    """Test a non-default directory lands in settings.hook_directory."""
    init_command(env, runner, git_repo_fs, dirname="hooks")

    assert load_config(git_repo_fs).settings.hook_directory == "hooks"
    assert git_repo_fs.exists("hooks/_/.gitignore")
    assert ("git", ["config", "core.hooksPath", "hooks/_"], True) in runner.calls


def test_init_keeps_existing_config(env, runner, git_repo_fs, capsys):
    """Test an existing samoyed.toml is left untouched."""
    fs = git_repo_fs.with_file("samoyed.toml", '[hooks]\npre-commit = "make lint"\n')

    result = init_command(env, runner, fs)

    assert not result.config_created
    assert fs.files["samoyed.toml"] == '[hooks]\npre-commit = "make lint"\n'
    assert "already exists" in capsys.readouterr().out


def test_init_verbose_messages(runner, git_repo_fs, capsys):
    """Test SAMOYED_VERBOSE=1 adds verbose output and the install summary."""
    env = FakeEnvironment({"SAMOYED_VERBOSE": "1"})

    init_command(env, runner, git_repo_fs)

    out = capsys.readouterr().out
    assert "(verbose mode)" in out
    assert "Hook Installation" in out


def test_init_bypassed(runner, git_repo_fs, capsys):
    """Test SAMOYED=0 makes init touch nothing."""
    result = init_command(FakeEnvironment({"SAMOYED": "0"}), runner, git_repo_fs)

    assert result.bypassed
    assert git_repo_fs.files == {}
    assert runner.calls == []
    assert "Bypassing samoyed init (SAMOYED=0)" in capsys.readouterr().out


def test_init_traversal_mutates_nothing(env, runner, git_repo_fs):
    """Test an invalid directory fails before any write."""
    with pytest.raises(DirectoryTraversalError):
        init_command(env, runner, git_repo_fs, dirname="../escape")

    assert git_repo_fs.files == {}
    assert runner.calls == []


def test_init_outside_repository(env, runner, fs):
    """Test init outside a repository raises before writing anything."""
    with pytest.raises(NotGitRepositoryError) as exc:
        init_command(env, runner, fs)

    assert exc.value.exit_code == 66
    assert fs.files == {}


def test_init_warns_when_existing_config_uses_other_directory(env, runner, git_repo_fs, capsys):
    """Test init flags that scripts in the new directory would never be dispatched."""
    fs = git_repo_fs.with_file("samoyed.toml", '[hooks]\npre-commit = "make lint"\n')

    init_command(env, runner, fs, dirname=".hooks")

    out = capsys.readouterr().out
    assert 'sets hook_directory = ".samoyed"' in out
    assert '.hooks/scripts will not run until it is changed to ".hooks"' in out
    assert fs.files["samoyed.toml"] == '[hooks]\npre-commit = "make lint"\n'


def test_init_no_warning_when_directory_matches(env, runner, git_repo_fs, capsys):
    """Test no directory warning when the existing config already points at dirname."""
    fs = git_repo_fs.with_file(
        "samoyed.toml",
        '[hooks]\npre-commit = "make lint"\n\n[settings]\nhook_directory = ".hooks"\n',
    )

    init_command(env, runner, fs, dirname=".hooks")

    assert "Warning" not in capsys.readouterr().out
