"""Core modules for samoyed: capabilities, errors, models and config."""

from .config_loader import ConfigLoader, ConfigLoadError, dump_config, load_config, load_optional_config
from .environment import (
    CommandResult,
    CommandRunner,
    Environment,
    FileSystem,
    Platform,
    SystemCommandRunner,
    SystemEnvironment,
    SystemFileSystem,
)
from .exit_codes import SamoyedError, exit_code_for
from .models import (
    STANDARD_HOOKS,
    ExecutionContext,
    ExecutionMode,
    HookDefinition,
    SamoyedConfig,
    SamoyedSettings,
    ShellPlan,
)
from .project import ProjectType

__all__ = [
    # Capabilities
    "CommandResult",
    "CommandRunner",
    "Environment",
    "FileSystem",
    "Platform",
    "SystemCommandRunner",
    "SystemEnvironment",
    "SystemFileSystem",
    # Errors
    "SamoyedError",
    "exit_code_for",
    # Models
    "STANDARD_HOOKS",
    "ExecutionContext",
    "ExecutionMode",
    "HookDefinition",
    "SamoyedConfig",
    "SamoyedSettings",
    "ShellPlan",
    "ProjectType",
    # Loaders
    "ConfigLoader",
    "ConfigLoadError",
    "dump_config",
    "load_config",
    "load_optional_config",
]
