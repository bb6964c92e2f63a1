"""
SAMOYED - Git Hooks Installer
Gera os wrappers de hook, o .gitignore e os scripts de exemplo.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ..config import DEFAULT_HOOK_DIRECTORY, HOOKS_SUBDIR, SCRIPTS_SUBDIR
from ..core.environment import CommandRunner, Environment, FileSystem, Platform
from ..core.exit_codes import EX_IOERR, SamoyedError
from ..core.models import STANDARD_HOOKS, ExecutionMode
from ..vcs.git_config import GitConfigurator
from .validation import validate_hooks_directory_path


# =============================================================================
# Exceptions
# =============================================================================

class HookError(SamoyedError):
    """Falha ao gerar arquivos de hook."""

    exit_code = EX_IOERR


class HookIOError(HookError):
    """Erro de I/O durante a instalação (sem rollback)."""

    def __init__(self, error: OSError, path: Optional[Path] = None):
        self.error = error
        self.path = path
        target = f" ({path})" if path is not None else ""
        super().__init__(f"IO error: {error}{target}")


# =============================================================================
# Hook Templates
# =============================================================================

WRAPPER_TEMPLATE = """#!/usr/bin/env sh
exec samoyed hook -- "$(basename "$0")" "$@"
"""

GITIGNORE_CONTENT = "*"

PRE_COMMIT_EXAMPLE = """#!/usr/bin/env sh
# Example pre-commit hook
# Add your formatting, linting, or other pre-commit checks here

echo "Running pre-commit checks..."

# Example: Run formatter (uncomment and customize as needed)
# cargo fmt --check
# npm run format:check
# black --check .

echo "Pre-commit checks passed!"
"""

PRE_PUSH_EXAMPLE = """#!/usr/bin/env sh
# Example pre-push hook
# Add your test runs or other pre-push validations here

echo "Running pre-push validations..."

# Example: Run tests (uncomment and customize as needed)
# cargo test
# npm test
# pytest

echo "Pre-push validations passed!"
"""

EXAMPLE_SCRIPTS = {
    "pre-commit": PRE_COMMIT_EXAMPLE,
    "pre-push": PRE_PUSH_EXAMPLE,
}

EXECUTABLE_MODE = 0o755


def normalize_line_endings(content: str) -> str:
    """Converte CRLF e CR soltos em LF."""
    return content.replace("\r\n", "\n").replace("\r", "\n")


# =============================================================================
# Install Result
# =============================================================================

@dataclass
class InstallResult:
    """O que a instalação gravou (ou pulou)."""
    hooks_dir: Path
    wrappers: List[Path] = field(default_factory=list)
    examples_created: List[Path] = field(default_factory=list)
    examples_kept: List[Path] = field(default_factory=list)
    bypassed: bool = False


# =============================================================================
# Hook Installer Class
# =============================================================================

class HookInstaller:
    """
    Gera a árvore de hooks dentro de um diretório base.

    Layout:
        <base>/_/.gitignore        conteúdo "*"
        <base>/_/<hook>            wrapper, sempre regravado
        <base>/scripts/<hook>      exemplo, criado só se ausente

    Os wrappers pertencem ao samoyed e são sempre sobrescritos; os scripts
    em scripts/ pertencem ao usuário depois de criados e nunca são tocados.
    Não há rollback: uma falha no meio deixa o diretório parcialmente
    populado.
    """

    def __init__(self, fs: FileSystem, base_dir: str = DEFAULT_HOOK_DIRECTORY):
        self.fs = fs
        self.base_dir = Path(base_dir)

    @property
    def hooks_dir(self) -> Path:
        return self.base_dir / HOOKS_SUBDIR

    @property
    def scripts_dir(self) -> Path:
        return self.base_dir / SCRIPTS_SUBDIR

    def create_hook_directory(self) -> None:
        """Cria o diretório de wrappers e o .gitignore."""
        self._mkdir(self.hooks_dir)
        self._write(self.hooks_dir / ".gitignore", GITIGNORE_CONTENT)

    def create_hook_files(self) -> List[Path]:
        """Grava um wrapper executável para cada hook padrão."""
        written = []
        for hook_name in STANDARD_HOOKS:
            hook_path = self.hooks_dir / hook_name
            self._write(hook_path, WRAPPER_TEMPLATE)
            self._chmod(hook_path, EXECUTABLE_MODE)
            written.append(hook_path)
        return written

    def create_example_scripts(self, result: InstallResult) -> None:
        """Semeia scripts de exemplo sem sobrescrever os existentes."""
        self._mkdir(self.scripts_dir)

        for hook_name, content in EXAMPLE_SCRIPTS.items():
            script_path = self.scripts_dir / hook_name
            if self.fs.exists(script_path):
                result.examples_kept.append(script_path)
                continue

            self._write(script_path, content)
            self._chmod(script_path, EXECUTABLE_MODE)
            result.examples_created.append(script_path)

    def install_all(self, with_examples: bool = True) -> InstallResult:
        """Gera diretório, wrappers e (opcionalmente) exemplos."""
        result = InstallResult(hooks_dir=self.hooks_dir)

        self.create_hook_directory()
        result.wrappers = self.create_hook_files()

        if with_examples:
            self.create_example_scripts(result)

        return result

    # -------------------------------------------------------------------------
    # I/O helpers: qualquer OSError aborta com HookIOError
    # -------------------------------------------------------------------------

    def _mkdir(self, path: Path) -> None:
        try:
            self.fs.mkdir_all(path)
        except OSError as e:
            raise HookIOError(e, path)

    def _write(self, path: Path, content: str) -> None:
        try:
            self.fs.write_text(path, normalize_line_endings(content))
        except OSError as e:
            raise HookIOError(e, path)

    def _chmod(self, path: Path, mode: int) -> None:
        try:
            self.fs.chmod(path, mode)
        except OSError as e:
            raise HookIOError(e, path)


# =============================================================================
# Helper Functions
# =============================================================================

def install_hooks(
    env: Environment,
    runner: CommandRunner,
    fs: FileSystem,
    custom_dir: Optional[str] = None,
    platform: Optional[Platform] = None,
) -> InstallResult:
    """
    Instala samoyed no repositório atual.

    Ordem: validação do path, checagem do repositório, core.hooksPath,
    arquivos. Nada é gravado se a validação ou a checagem falharem.

    Args:
        env: Ambiente (SAMOYED=0 pula a instalação)
        runner: Executor de comandos (git)
        fs: Filesystem
        custom_dir: Diretório base (default: .samoyed)
        platform: Plataforma alvo para validar o path

    Returns:
        InstallResult

    Raises:
        PathValidationError, GitError, HookError
    """
    base_dir = custom_dir if custom_dir is not None else DEFAULT_HOOK_DIRECTORY

    if ExecutionMode.from_environment(env) == ExecutionMode.SKIP:
        return InstallResult(hooks_dir=Path(base_dir) / HOOKS_SUBDIR, bypassed=True)

    validate_hooks_directory_path(base_dir, platform)

    git = GitConfigurator(runner, fs)
    git.check_repository()
    # core.hooksPath sempre com "/" (git aceita nos dois sistemas)
    git.set_hooks_path(f"{base_dir}/{HOOKS_SUBDIR}")

    return HookInstaller(fs, base_dir).install_all()


def print_install_summary(result: InstallResult, console: Optional[Console] = None):
    """Printa resumo da instalação (modo verbose)."""
    console = console or Console(markup=False, highlight=False)
    table = Table(title="Hook Installation")

    table.add_column("Path", style="cyan")
    table.add_column("Status", style="green")

    table.add_row(str(result.hooks_dir), f"✅ {len(result.wrappers)} wrappers")
    for path in result.examples_created:
        table.add_row(str(path), "✅ example created")
    for path in result.examples_kept:
        table.add_row(str(path), "⏭️  kept (already exists)")

    console.print(table)


__all__ = [
    "HookError",
    "HookIOError",
    "HookInstaller",
    "InstallResult",
    "WRAPPER_TEMPLATE",
    "EXAMPLE_SCRIPTS",
    "normalize_line_endings",
    "install_hooks",
    "print_install_summary",
]
