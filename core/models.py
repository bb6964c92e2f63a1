"""
SAMOYED - Core Data Models
Estruturas de dados do instalador e do dispatcher de hooks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from ..config import DEFAULT_HOOK_DIRECTORY, ENV_MODE, ENV_MODE_LEGACY
from .project import ProjectType

if TYPE_CHECKING:
    from .environment import Environment


# =============================================================================
# Standard Git Hooks
# =============================================================================

STANDARD_HOOKS: Tuple[str, ...] = (
    "applypatch-msg",
    "commit-msg",
    "post-applypatch",
    "post-checkout",
    "post-commit",
    "post-merge",
    "post-rewrite",
    "pre-applypatch",
    "pre-auto-gc",
    "pre-commit",
    "pre-merge-commit",
    "pre-push",
    "pre-rebase",
    "prepare-commit-msg",
)


def is_valid_hook_name(name: str) -> bool:
    """Verifica se o nome é um dos 14 hooks padrão do Git."""
    return name in STANDARD_HOOKS


# =============================================================================
# Enums
# =============================================================================

class ExecutionMode(str, Enum):
    """Modo de execução derivado de SAMOYED (ou SAMOID)."""
    SKIP = "skip"
    NORMAL = "normal"
    DEBUG = "debug"

    @classmethod
    def from_env_value(cls, value: Optional[str]) -> "ExecutionMode":
        """'0' pula, '2' liga debug, qualquer outro valor é normal."""
        if value == "0":
            return cls.SKIP
        if value == "2":
            return cls.DEBUG
        return cls.NORMAL

    @classmethod
    def from_environment(cls, env: "Environment") -> "ExecutionMode":
        """Lê SAMOYED, caindo para o legado SAMOID; default '1'."""
        value = env.get(ENV_MODE)
        if value is None:
            value = env.get(ENV_MODE_LEGACY)
        return cls.from_env_value(value if value is not None else "1")


# =============================================================================
# Dispatch Models
# =============================================================================

@dataclass(frozen=True)
class HookDefinition:
    """Hook com o comando configurado em samoyed.toml (se houver)."""
    name: str
    command: Optional[str] = None

    @property
    def has_command(self) -> bool:
        return bool(self.command and self.command.strip())


@dataclass
class ExecutionContext:
    """Contexto de uma única invocação do dispatcher."""
    hook_name: str
    hook_args: List[str]
    mode: ExecutionMode = ExecutionMode.NORMAL

    @property
    def debug(self) -> bool:
        return self.mode == ExecutionMode.DEBUG


@dataclass(frozen=True)
class ShellPlan:
    """Programa e argumentos escolhidos pelo seletor de shell."""
    program: str
    args: Tuple[str, ...]

    def argv(self) -> List[str]:
        return [self.program, *self.args]


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class SamoyedSettings:
    """Seção [settings] de samoyed.toml (tudo opcional)."""
    hook_directory: str = DEFAULT_HOOK_DIRECTORY
    debug: bool = False
    fail_fast: bool = True
    skip_hooks: bool = False

    def is_default(self) -> bool:
        return self == SamoyedSettings()

    def to_dict(self) -> Dict[str, object]:
        return {
            "hook_directory": self.hook_directory,
            "debug": self.debug,
            "fail_fast": self.fail_fast,
            "skip_hooks": self.skip_hooks,
        }


@dataclass
class SamoyedConfig:
    """Conteúdo de samoyed.toml: hooks + settings."""
    hooks: Dict[str, str] = field(default_factory=dict)
    settings: SamoyedSettings = field(default_factory=SamoyedSettings)

    @classmethod
    def default_for_project_type(cls, project_type: ProjectType) -> "SamoyedConfig":
        """Config inicial com os comandos recomendados para o tipo de projeto."""
        hooks = {"pre-commit": project_type.default_pre_commit_command}

        pre_push = project_type.default_pre_push_command
        if pre_push:
            hooks["pre-push"] = pre_push

        return cls(hooks=hooks)

    def hook(self, name: str) -> HookDefinition:
        """HookDefinition para o hook pedido (sem comando se ausente)."""
        return HookDefinition(name=name, command=self.hooks.get(name))

    def validate(self) -> List[str]:
        """
        Valida a configuração.

        Returns:
            Lista de erros (vazia se válida)
        """
        from ..hooks.validation import PathValidationError, validate_hooks_directory_path

        errors: List[str] = []

        if not self.hooks:
            errors.append("At least one hook must be defined in [hooks] section")

        for hook_name, command in self.hooks.items():
            if not is_valid_hook_name(hook_name):
                errors.append(f"Invalid Git hook name: '{hook_name}'")
            elif not command.strip():
                errors.append(f"Hook '{hook_name}' cannot have empty command")

        try:
            validate_hooks_directory_path(self.settings.hook_directory)
        except PathValidationError as e:
            errors.append(f"hook_directory: {e.reason}")

        return errors

    def to_dict(self) -> Dict[str, object]:
        """Serializa para dict (omite [settings] quando tudo é default)."""
        data: Dict[str, object] = {"hooks": dict(self.hooks)}
        if not self.settings.is_default():
            data["settings"] = self.settings.to_dict()
        return data


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "STANDARD_HOOKS",
    "is_valid_hook_name",
    "ExecutionMode",
    "HookDefinition",
    "ExecutionContext",
    "ShellPlan",
    "SamoyedSettings",
    "SamoyedConfig",
]
