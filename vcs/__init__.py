"""Git repository detection and configuration."""

from .git_config import (
    CommandNotFoundError,
    ConfigurationFailedError,
    GitConfigurator,
    GitError,
    NotGitRepositoryError,
    PermissionDeniedError,
    check_git_repository,
    set_hooks_path,
)

__all__ = [
    "CommandNotFoundError",
    "ConfigurationFailedError",
    "GitConfigurator",
    "GitError",
    "NotGitRepositoryError",
    "PermissionDeniedError",
    "check_git_repository",
    "set_hooks_path",
]
