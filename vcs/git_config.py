"""
SAMOYED - Git Configuration
Detecta o repositório e aponta core.hooksPath para os wrappers.
"""

import os
from typing import Optional

from ..core.environment import CommandRunner, FileSystem, detect_os
from ..core.exit_codes import (
    EX_CONFIG,
    EX_NOINPUT,
    EX_NOPERM,
    EX_TEMPFAIL,
    EX_UNAVAILABLE,
    SamoyedError,
)


GIT_COMMAND = "git"

_INSTALL_HINTS = {
    "linux": (
        "To install Git:\n"
        "  • Ubuntu/Debian: sudo apt install git\n"
        "  • RHEL/CentOS: sudo yum install git\n"
        "  • Arch: sudo pacman -S git"
    ),
    "macos": (
        "To install Git:\n"
        "  • Using Homebrew: brew install git\n"
        "  • Using Xcode tools: xcode-select --install"
    ),
    "windows": (
        "To install Git:\n"
        "  • Download from: https://git-scm.com/download/windows\n"
        "  • Or use winget: winget install Git.Git"
    ),
}

_GENERIC_INSTALL_HINT = "Please install Git and ensure it's in your PATH"

LOCK_CONTENTION_MARKER = "could not lock config file"


# =============================================================================
# Exceções
# =============================================================================

class GitError(SamoyedError):
    """Erro ao interagir com o git."""
    pass


class CommandNotFoundError(GitError):
    """Executável git ausente do PATH."""

    exit_code = EX_UNAVAILABLE

    def __init__(self, os_hint: Optional[str] = None):
        self.os_hint = os_hint
        super().__init__(
            "Git command not found in PATH",
            _INSTALL_HINTS.get(os_hint or "", _GENERIC_INSTALL_HINT),
        )


class ConfigurationFailedError(GitError):
    """`git config` retornou erro."""

    exit_code = EX_CONFIG

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.stderr = message
        if LOCK_CONTENTION_MARKER in message.lower():
            # Outro processo segura o lock: o usuário pode tentar de novo
            self.exit_code = EX_TEMPFAIL
        super().__init__(
            f"Git configuration failed: {message}",
            f"Suggestion: {suggestion}" if suggestion else None,
        )


class NotGitRepositoryError(GitError):
    """Diretório atual não é um repositório git."""

    exit_code = EX_NOINPUT

    def __init__(self, checked_path: str, suggest_init: bool = True):
        self.checked_path = checked_path
        self.suggest_init = suggest_init
        super().__init__(
            f"Not a Git repository (no .git directory found in '{checked_path}')",
            "To initialize a new Git repository:\n  git init" if suggest_init else None,
        )


class PermissionDeniedError(GitError):
    """Sem permissão para alterar a configuração do git."""

    exit_code = EX_NOPERM

    def __init__(self, operation: str, path: Optional[str] = None):
        self.operation = operation
        self.path = path
        message = f"Permission denied: {operation}"
        if path:
            message += f" (path: {path})"
        super().__init__(
            message,
            "Check file permissions and try:\n"
            "  • Running with appropriate user permissions\n"
            "  • Ensuring the repository is not locked by another process",
        )


# =============================================================================
# Git Configurator
# =============================================================================

class GitConfigurator:
    """
    Operações de git necessárias para a instalação.

    Responsabilidades:
    - Verificar se existe .git no diretório atual (arquivo ou diretório)
    - Validar que o git está instalado
    - Gravar core.hooksPath
    """

    def __init__(self, runner: CommandRunner, fs: FileSystem):
        self.runner = runner
        self.fs = fs

    def check_repository(self) -> None:
        """
        Verifica que o cwd é a raiz de um repositório git.

        Worktrees usam um arquivo .git em vez de diretório; os dois valem.

        Raises:
            NotGitRepositoryError: Se não existir .git
        """
        if not self.fs.exists(".git"):
            try:
                checked = os.getcwd()
            except OSError:
                checked = "."
            raise NotGitRepositoryError(checked)

    def set_hooks_path(self, hooks_path: str) -> None:
        """
        Grava `core.hooksPath` na configuração do repositório.

        Args:
            hooks_path: Diretório dos wrappers (ex: ".samoyed/_")

        Raises:
            CommandNotFoundError: git ausente ou quebrado
            PermissionDeniedError: stderr reporta permissão negada
            ConfigurationFailedError: qualquer outra falha do git config
        """
        self._ensure_git_available()

        try:
            result = self.runner.run(GIT_COMMAND, ["config", "core.hooksPath", hooks_path])
        except OSError:
            raise CommandNotFoundError(detect_os())

        if result.success:
            return

        stderr = result.stderr.strip()
        if "permission denied" in stderr.lower():
            raise PermissionDeniedError("set Git configuration")

        raise ConfigurationFailedError(stderr, analyze_git_config_error(stderr))

    def _ensure_git_available(self) -> None:
        try:
            result = self.runner.run(GIT_COMMAND, ["--version"])
        except OSError:
            raise CommandNotFoundError(detect_os())

        if not result.success:
            raise CommandNotFoundError(detect_os())


# =============================================================================
# Helper Functions
# =============================================================================

def analyze_git_config_error(stderr: str) -> Optional[str]:
    """
    Sugestão de correção para um erro de `git config`.

    Args:
        stderr: Saída de erro do git

    Returns:
        Dica curta ou None se o erro não for reconhecido
    """
    lower = stderr.lower()

    if LOCK_CONTENTION_MARKER in lower:
        return (
            "Another Git process may be running. Wait and try again, "
            "or check for stale .git/config.lock files."
        )
    if "not a git repository" in lower:
        return "Run this command from within a Git repository."
    if "bad config" in lower:
        return "Git configuration file may be corrupted. Check .git/config for syntax errors."
    if "invalid key" in lower:
        return "The configuration key format is invalid. Check the Git documentation."
    return None


def check_git_repository(fs: FileSystem) -> None:
    """Helper: verifica .git no diretório atual."""
    GitConfigurator(runner=None, fs=fs).check_repository()


def set_hooks_path(runner: CommandRunner, hooks_path: str) -> None:
    """Helper: grava core.hooksPath."""
    GitConfigurator(runner=runner, fs=None).set_hooks_path(hooks_path)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "GitConfigurator",
    "GitError",
    "CommandNotFoundError",
    "ConfigurationFailedError",
    "NotGitRepositoryError",
    "PermissionDeniedError",
    "analyze_git_config_error",
    "check_git_repository",
    "set_hooks_path",
]
