"""
SAMOYED - Shell Selection
Decide qual shell/interpretador executa um script ou comando de hook.

Função pura: nenhum processo é criado aqui.
"""

from pathlib import PurePath
from typing import Optional, Sequence

from ..core.environment import Environment, Platform
from ..core.models import ShellPlan
from ..core.sanitize import debug_log


UNIX_LIKE_MSYSTEMS = ("MINGW32", "MINGW64", "MSYS")


def is_windows_unix_environment(env: Environment, debug: bool = False) -> bool:
    """
    Detecta um shell Unix rodando no Windows (Git Bash, MSYS2, Cygwin, WSL).

    Args:
        env: Ambiente
        debug: Loga o motivo da detecção

    Returns:
        True se devemos usar `sh` mesmo no Windows
    """
    msystem = env.get("MSYSTEM")
    if msystem in UNIX_LIKE_MSYSTEMS:
        debug_log(debug, f"Detected Git Bash/MSYS2 environment (MSYSTEM={msystem})")
        return True

    if env.get("CYGWIN") is not None:
        debug_log(debug, "Detected Cygwin environment")
        return True

    if env.get("WSL_DISTRO_NAME") is not None or env.get("WSL_INTEROP") is not None:
        debug_log(debug, "Detected WSL environment")
        return True

    return False


def uses_unix_shell(platform: Platform, env: Environment, debug: bool = False) -> bool:
    """True quando o alvo é Unix ou um ambiente Unix-like no Windows."""
    if platform == Platform.UNIX:
        return True
    return is_windows_unix_environment(env, debug)


def select_for_script(
    platform: Platform,
    env: Environment,
    script_path: str,
    hook_args: Sequence[str] = (),
    debug: bool = False,
) -> ShellPlan:
    """
    Escolhe o shell para um arquivo de script.

    Os argumentos do hook vão juntos, separados por espaço, em um único
    argumento final (vazio quando não há argumentos).

    - Unix / Unix-like no Windows: sh -e <script> "<args>"
    - Windows .bat/.cmd:            cmd /C <script> "<args>"
    - Windows .ps1:                 powershell -ExecutionPolicy Bypass -File <script> "<args>"
    - Windows sem extensão/outra:   cmd /C <script> "<args>"
    """
    joined = " ".join(hook_args)

    if uses_unix_shell(platform, env, debug):
        return ShellPlan("sh", ("-e", script_path, joined))

    extension = PurePath(script_path.replace("\\", "/")).suffix.lower()

    if extension == ".ps1":
        return ShellPlan(
            "powershell",
            ("-ExecutionPolicy", "Bypass", "-File", script_path, joined),
        )

    if extension not in (".bat", ".cmd"):
        debug_log(debug, f"Unknown script extension '{extension}', defaulting to cmd")

    return ShellPlan("cmd", ("/C", script_path, joined))


def select_for_command(
    platform: Platform,
    env: Environment,
    command: str,
    hook_name: Optional[str] = None,
    hook_args: Sequence[str] = (),
    debug: bool = False,
) -> ShellPlan:
    """
    Escolhe o shell para um comando vindo de samoyed.toml.

    Sem arquivo não há despacho por extensão:
    - Unix / Unix-like no Windows: sh -c <command> <hook_name> <args...>
      ($0 é o nome do hook, $1.. são os argumentos do Git)
    - Windows nativo:               cmd /C <command> <args...>
    """
    if uses_unix_shell(platform, env, debug):
        positional = (hook_name or "sh", *hook_args)
        return ShellPlan("sh", ("-c", command, *positional))

    return ShellPlan("cmd", ("/C", command, *hook_args))


__all__ = [
    "UNIX_LIKE_MSYSTEMS",
    "is_windows_unix_environment",
    "uses_unix_shell",
    "select_for_script",
    "select_for_command",
]
