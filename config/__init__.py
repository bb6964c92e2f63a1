"""Default names and locations used by samoyed."""

CONFIG_FILE_NAME = "samoyed.toml"
DEFAULT_HOOK_DIRECTORY = ".samoyed"
HOOKS_SUBDIR = "_"
SCRIPTS_SUBDIR = "scripts"

ENV_MODE = "SAMOYED"
ENV_MODE_LEGACY = "SAMOID"
ENV_VERBOSE = "SAMOYED_VERBOSE"

INIT_SCRIPT_DIR = "samoyed"
INIT_SCRIPT_NAME = "init.sh"

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_HOOK_DIRECTORY",
    "HOOKS_SUBDIR",
    "SCRIPTS_SUBDIR",
    "ENV_MODE",
    "ENV_MODE_LEGACY",
    "ENV_VERBOSE",
    "INIT_SCRIPT_DIR",
    "INIT_SCRIPT_NAME",
]
