"""Pytest configuration and fixtures."""

import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Set, Tuple

import pytest

from samoyed.core.environment import CommandResult


# =============================================================================
# In-memory capabilities
# =============================================================================

class FakeEnvironment:
    """Environment backed by a plain dict."""

    def __init__(self, variables: Optional[Dict[str, str]] = None):
        self.variables: Dict[str, str] = dict(variables or {})

    def with_var(self, key: str, value: str) -> "FakeEnvironment":
        self.variables[key] = value
        return self

    def get(self, key: str) -> Optional[str]:
        return self.variables.get(key)


class FakeFileSystem:
    """Filesystem kept in memory; paths are compared in POSIX form."""

    def __init__(self):
        self.files: Dict[str, str] = {}
        self.directories: Set[str] = set()
        self.modes: Dict[str, int] = {}
        self.fail_on_write: Set[str] = set()

    @staticmethod
    def _key(path) -> str:
        return Path(path).as_posix()

    def with_file(self, path, content: str = "") -> "FakeFileSystem":
        self.files[self._key(path)] = content
        return self

    def with_directory(self, path) -> "FakeFileSystem":
        self.mkdir_all(path)
        return self

    def failing_writes(self, path) -> "FakeFileSystem":
        self.fail_on_write.add(self._key(path))
        return self

    def exists(self, path) -> bool:
        key = self._key(path)
        return key in self.files or key in self.directories

    def read_text(self, path) -> str:
        key = self._key(path)
        if key not in self.files:
            raise FileNotFoundError(2, "No such file or directory", key)
        return self.files[key]

    def write_text(self, path, content: str) -> None:
        key = self._key(path)
        if key in self.fail_on_write:
            raise PermissionError(13, "Permission denied", key)
        self.files[key] = content

    def mkdir_all(self, path) -> None:
        current = Path(path)
        while current.as_posix() not in (".", ""):
            self.directories.add(current.as_posix())
            current = current.parent

    def chmod(self, path, mode: int) -> None:
        self.modes[self._key(path)] = mode


class FakeCommandRunner:
    """Records calls and answers with scripted results."""

    def __init__(self):
        self.calls: List[Tuple[str, List[str], bool]] = []
        self.responses: List[Tuple[str, Tuple[str, ...], CommandResult]] = []
        self.unspawnable: Set[str] = set()

    def with_response(
        self,
        program: str,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        args_prefix: Sequence[str] = (),
    ) -> "FakeCommandRunner":
        self.responses.append(
            (program, tuple(args_prefix), CommandResult(returncode, stdout, stderr))
        )
        return self

    def failing_spawn(self, program: str) -> "FakeCommandRunner":
        self.unspawnable.add(program)
        return self

    def run(self, program: str, args: List[str], capture: bool = True) -> CommandResult:
        self.calls.append((program, list(args), capture))

        if program in self.unspawnable:
            raise FileNotFoundError(2, "No such file or directory", program)

        for expected, prefix, result in reversed(self.responses):
            if expected == program and tuple(args[: len(prefix)]) == prefix:
                return result
        return CommandResult(0)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def env():
    """Empty environment (no SAMOYED, no HOME)."""
    return FakeEnvironment()


@pytest.fixture
def fs():
    """In-memory filesystem."""
    return FakeFileSystem()


@pytest.fixture
def runner():
    """Runner that answers success to every call."""
    return FakeCommandRunner()


@pytest.fixture
def git_repo_fs(fs):
    """In-memory filesystem containing a .git directory."""
    return fs.with_directory(".git")


@pytest.fixture
def temp_git_repo(tmp_path, monkeypatch):
    """Create a temporary git repository and chdir into it."""
    if shutil.which("git") is None:
        pytest.skip("git not available")

    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_dir,
        check=True
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_dir,
        check=True
    )

    monkeypatch.chdir(repo_dir)
    monkeypatch.delenv("SAMOYED", raising=False)
    monkeypatch.delenv("SAMOID", raising=False)
    return repo_dir
