"""Tests for project type detection."""

import pytest

from samoyed.core.models import SamoyedConfig
from samoyed.core.project import ProjectType


@pytest.mark.parametrize(
    "marker, expected",
    [
        ("Cargo.toml", ProjectType.RUST),
        ("go.sum", ProjectType.GO),
        ("package.json", ProjectType.NODE),
        ("Pipfile", ProjectType.PYTHON),
        ("pyproject.toml", ProjectType.PYTHON),
    ],
)
def test_auto_detect(fs, marker, expected):
    """Test each marker file selects its project type."""
    fs.with_file(marker)
    assert ProjectType.auto_detect(fs) == expected


def test_auto_detect_priority(fs):
    """Test Rust wins over Node when both markers exist."""
    fs.with_file("package.json").with_file("Cargo.toml")
    assert ProjectType.auto_detect(fs) == ProjectType.RUST


def test_auto_detect_unknown(fs):
    """Test no marker files yields UNKNOWN."""
    assert ProjectType.auto_detect(fs) == ProjectType.UNKNOWN


@pytest.mark.parametrize(
    "name, expected",
    [
        ("rs", ProjectType.RUST),
        ("Golang", ProjectType.GO),
        (" TypeScript ", ProjectType.NODE),
        ("py", ProjectType.PYTHON),
        ("cobol", None),
    ],
)
def test_from_string(name, expected):
    """Test project type aliases are case-insensitive."""
    assert ProjectType.from_string(name) == expected


def test_default_commands():
    """Test default commands and display names."""
    assert ProjectType.GO.default_pre_push_command == "go test ./..."
    assert ProjectType.UNKNOWN.default_pre_push_command is None
    assert ProjectType.NODE.display_name == "Node.js"


def test_default_config_for_unknown_has_only_pre_commit():
    """Test the UNKNOWN default config is valid with a single hook."""
    config = SamoyedConfig.default_for_project_type(ProjectType.UNKNOWN)
    assert list(config.hooks) == ["pre-commit"]
    assert config.validate() == []
