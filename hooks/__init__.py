"""Hook directory validation, installation and the init command."""

from .init import InitResult, init_command
from .install import (
    HookError,
    HookInstaller,
    HookIOError,
    InstallResult,
    install_hooks,
)
from .validation import PathValidationError, validate_hooks_directory_path

__all__ = [
    "HookError",
    "HookInstaller",
    "HookIOError",
    "InitResult",
    "InstallResult",
    "PathValidationError",
    "init_command",
    "install_hooks",
    "validate_hooks_directory_path",
]
