"""
SAMOYED - Environment Abstractions
Interfaces estreitas para ambiente, filesystem e processos.

Todo componente recebe essas capacidades por injeção: em produção usamos
as implementações System*, nos testes usamos fakes em memória.
"""

import os
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Protocol, Union


PathLike = Union[str, Path]


# =============================================================================
# Platform
# =============================================================================

class Platform(str, Enum):
    """Família de plataforma alvo (decide shell e regras de path)."""
    UNIX = "unix"
    WINDOWS = "windows"

    @classmethod
    def current(cls) -> "Platform":
        """Plataforma em que o processo está rodando."""
        return cls.WINDOWS if os.name == "nt" else cls.UNIX


def detect_os() -> Optional[str]:
    """
    Detecta o sistema operacional para sugestões de instalação.

    Returns:
        "linux", "macos", "windows" ou None para outras plataformas
    """
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "macos"
    if sys.platform in ("win32", "cygwin"):
        return "windows"
    return None


# =============================================================================
# Command Result
# =============================================================================

@dataclass
class CommandResult:
    """Resultado de um processo executado."""
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


# =============================================================================
# Capability Interfaces
# =============================================================================

class Environment(Protocol):
    """Leitura de variáveis de ambiente."""

    def get(self, key: str) -> Optional[str]:
        ...


class FileSystem(Protocol):
    """Operações de filesystem usadas pelo instalador e pelo dispatcher."""

    def exists(self, path: PathLike) -> bool:
        ...

    def read_text(self, path: PathLike) -> str:
        ...

    def write_text(self, path: PathLike, content: str) -> None:
        ...

    def mkdir_all(self, path: PathLike) -> None:
        ...

    def chmod(self, path: PathLike, mode: int) -> None:
        ...


class CommandRunner(Protocol):
    """Execução de processos externos."""

    def run(self, program: str, args: List[str], capture: bool = True) -> CommandResult:
        ...


# =============================================================================
# System Implementations
# =============================================================================

class SystemEnvironment:
    """Lê o ambiente real do processo."""

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)


class SystemFileSystem:
    """Filesystem real (paths relativos resolvem contra o cwd)."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def read_text(self, path: PathLike) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: PathLike, content: str) -> None:
        # newline="" evita que o Windows converta \n em \r\n
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def mkdir_all(self, path: PathLike) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def chmod(self, path: PathLike, mode: int) -> None:
        # Sem bits de permissão Unix no Windows: no-op
        if os.name == "nt":
            return
        Path(path).chmod(mode)


class SystemCommandRunner:
    """
    Executa processos com subprocess.

    Com capture=False o filho herda stdin/stdout/stderr, então a saída
    passa direto para o terminal (e para o Git).

    Raises:
        OSError: Se o programa não puder ser iniciado
    """

    def run(self, program: str, args: List[str], capture: bool = True) -> CommandResult:
        if capture:
            result = subprocess.run(
                [program, *args],
                capture_output=True,
                text=True,
                check=False,
            )
            return CommandResult(result.returncode, result.stdout, result.stderr)

        result = subprocess.run([program, *args], check=False)
        return CommandResult(result.returncode)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "Platform",
    "detect_os",
    "CommandResult",
    "Environment",
    "FileSystem",
    "CommandRunner",
    "SystemEnvironment",
    "SystemFileSystem",
    "SystemCommandRunner",
]
