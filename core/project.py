"""
SAMOYED - Project Type Detection
Detecta o tipo de projeto para pré-popular samoyed.toml.
"""

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .environment import FileSystem


_DISPLAY_NAMES = {
    "rust": "Rust",
    "go": "Go",
    "node": "Node.js",
    "python": "Python",
    "unknown": "Unknown",
}

_PRE_COMMIT = {
    "rust": "cargo fmt --check && cargo clippy -- -D warnings",
    "go": "go fmt ./... && go vet ./...",
    "node": "npm run lint && npm test",
    "python": "black --check . && flake8",
    "unknown": "echo 'Please configure your pre-commit hook in samoyed.toml'",
}

_PRE_PUSH = {
    "rust": "cargo test --release",
    "go": "go test ./...",
    "node": "npm test",
    "python": "python -m pytest",
}

_ALIASES = {
    "rust": "rust", "rs": "rust",
    "go": "go", "golang": "go",
    "node": "node", "nodejs": "node", "javascript": "node",
    "js": "node", "typescript": "node", "ts": "node",
    "python": "python", "py": "python",
}

# Ordem importa: o primeiro marcador encontrado decide
_MARKERS = (
    ("rust", ("Cargo.toml",)),
    ("go", ("go.mod", "go.sum")),
    ("node", ("package.json",)),
    ("python", ("requirements.txt", "pyproject.toml", "setup.py", "Pipfile")),
)


class ProjectType(str, Enum):
    """Tipos de projeto suportados."""
    RUST = "rust"
    GO = "go"
    NODE = "node"
    PYTHON = "python"
    UNKNOWN = "unknown"

    @classmethod
    def auto_detect(cls, fs: "FileSystem", root: str = ".") -> "ProjectType":
        """
        Detecta o tipo de projeto pela presença de arquivos conhecidos.

        Args:
            fs: Filesystem
            root: Diretório a inspecionar

        Returns:
            ProjectType detectado (UNKNOWN se nada bater)
        """
        base = Path(root)
        for value, markers in _MARKERS:
            if any(fs.exists(base / marker) for marker in markers):
                return cls(value)
        return cls.UNKNOWN

    @classmethod
    def from_string(cls, name: str) -> Optional["ProjectType"]:
        """Converte um nome/alias (case-insensitive) em ProjectType."""
        value = _ALIASES.get(name.strip().lower())
        return cls(value) if value else None

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]

    @property
    def default_pre_commit_command(self) -> str:
        return _PRE_COMMIT[self.value]

    @property
    def default_pre_push_command(self) -> Optional[str]:
        return _PRE_PUSH.get(self.value)


__all__ = ["ProjectType"]
