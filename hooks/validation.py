"""
SAMOYED - Hooks Directory Validation
Valida o nome do diretório de hooks antes de qualquer I/O.
"""

import re
from typing import Optional

from ..core.environment import Platform
from ..core.exit_codes import EX_DATAERR, EX_USAGE, SamoyedError


MAX_PATH_LENGTH = 255

_ALLOWED_UNIX = re.compile(r"[A-Za-z0-9_.\-/]")
_ALLOWED_WINDOWS = re.compile(r"[A-Za-z0-9_.\-/\\]")


# =============================================================================
# Exceptions
# =============================================================================

class PathValidationError(SamoyedError):
    """Path de diretório de hooks rejeitado."""

    exit_code = EX_DATAERR
    reason = "Invalid path"
    hint: Optional[str] = None

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        if reason is not None:
            self.reason = reason
        super().__init__(f"Invalid path '{path}': {self.reason}", self.hint)


class EmptyPathError(PathValidationError):
    exit_code = EX_USAGE
    reason = "Path cannot be empty"
    hint = "Provide a valid directory name like '.samoyed'."


class TooLongError(PathValidationError):
    hint = "Use a shorter directory name."

    def __init__(self, path: str):
        self.length = len(path)
        super().__init__(
            path,
            f"Path too long ({self.length} characters, maximum is {MAX_PATH_LENGTH})",
        )


class DirectoryTraversalError(PathValidationError):
    reason = "Directory traversal detected (contains '..')"
    hint = (
        "Security: Directory traversal attacks are not allowed.\n"
        "Use a relative path within the current directory."
    )


class AbsolutePathError(PathValidationError):
    reason = "Absolute paths not allowed (must be relative)"
    hint = "Use a relative path like '.samoyed' or 'hooks' instead."


class InvalidCharactersError(PathValidationError):
    exit_code = EX_USAGE
    hint = "Use only alphanumeric characters, hyphens, underscores, and dots."

    def __init__(self, path: str, characters: str):
        self.characters = characters
        super().__init__(path, f"Invalid characters in path: {characters}")


# =============================================================================
# Validation
# =============================================================================

def is_absolute_path(path: str, platform: Platform) -> bool:
    """Teste de path absoluto conforme a gramática da plataforma."""
    if platform == Platform.WINDOWS:
        drive = len(path) >= 3 and path[1] == ":" and path[2] == "\\"
        return drive or path.startswith("\\\\") or path.startswith("/")
    return path.startswith("/")


def validate_hooks_directory_path(path: str, platform: Optional[Platform] = None) -> None:
    """
    Valida um nome de diretório de hooks proposto pelo usuário.

    Checagens em ordem (para na primeira falha): vazio, tamanho,
    traversal, absoluto, caracteres. Traversal vem antes de absoluto
    para que "/a/../b" seja reportado como traversal.

    Args:
        path: Nome do diretório (ex: ".samoyed")
        platform: Plataforma alvo (default: a atual)

    Raises:
        PathValidationError: Subclasse específica da falha encontrada
    """
    platform = platform or Platform.current()

    if not path.strip():
        raise EmptyPathError(path)

    if len(path) > MAX_PATH_LENGTH:
        raise TooLongError(path)

    if ".." in path:
        raise DirectoryTraversalError(path)

    if is_absolute_path(path, platform):
        raise AbsolutePathError(path)

    allowed = _ALLOWED_WINDOWS if platform == Platform.WINDOWS else _ALLOWED_UNIX
    invalid = "".join(c for c in path if not allowed.fullmatch(c))
    if invalid:
        raise InvalidCharactersError(path, invalid)


__all__ = [
    "MAX_PATH_LENGTH",
    "PathValidationError",
    "EmptyPathError",
    "TooLongError",
    "DirectoryTraversalError",
    "AbsolutePathError",
    "InvalidCharactersError",
    "is_absolute_path",
    "validate_hooks_directory_path",
]
