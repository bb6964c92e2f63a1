"""Runtime side of samoyed: shell selection and hook dispatch."""

from .dispatch import HookDispatcher, dispatch
from .shell_select import select_for_command, select_for_script

__all__ = [
    "HookDispatcher",
    "dispatch",
    "select_for_command",
    "select_for_script",
]
