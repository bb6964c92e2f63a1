"""
SAMOYED - Safe Diagnostics
Saída de debug que nunca expõe segredos nem o layout do sistema.
"""

from pathlib import PurePath
from typing import List, Optional, Sequence

from rich.console import Console

from .environment import Environment, PathLike


# stderr pertence ao Git durante um hook: sem markup/highlight, texto cru
err_console = Console(stderr=True, markup=False, highlight=False, soft_wrap=True)

SENSITIVE_PATH_PATTERNS = (
    "/etc/passwd",
    "/etc/shadow",
    "/etc/hosts",
    "/.ssh/",
    "/.gnupg/",
    "/proc/",
    "/sys/",
)

_SECRET_MARKERS = ("password", "token", "secret", "key=")

_SENSITIVE_VARS = (
    "password", "secret", "token", "key", "api_key", "auth",
    "ssh_", "gpg_", "pgp_", "private", "cert", "credential",
)

_SEMI_SENSITIVE_VARS = (
    "path", "home", "user", "pwd", "tmp", "temp", "config", "cache", "data",
)

_BASE64_CHARS = set("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/=")


# =============================================================================
# Sanitizers
# =============================================================================

def sanitize_path(path: PathLike, env: Optional[Environment] = None) -> str:
    """
    Versão segura de um path para logs.

    - Diretórios sensíveis viram [REDACTED_SENSITIVE_PATH]
    - Paths dentro do HOME viram ~/...
    - Outros absolutos longos mostram só os 3 últimos componentes
    - Relativos passam inalterados
    """
    text = str(path)

    for pattern in SENSITIVE_PATH_PATTERNS:
        if pattern in text:
            return "[REDACTED_SENSITIVE_PATH]"

    is_absolute = PurePath(text).is_absolute() or text.startswith("/")
    if not is_absolute:
        return text

    if env is not None:
        home = env.get("HOME") or env.get("USERPROFILE")
        if home:
            normalized = text.replace("\\", "/")
            normalized_home = home.replace("\\", "/").rstrip("/")
            if normalized == normalized_home or normalized.startswith(normalized_home + "/"):
                return "~" + normalized[len(normalized_home):]

    parts = [p for p in text.replace("\\", "/").split("/") if p]
    if len(parts) > 3:
        return ".../" + "/".join(parts[-3:])
    return text


def sanitize_args(args: Sequence[str]) -> List[str]:
    """Redige argumentos que parecem segredos ou paths sensíveis."""
    sanitized = []
    for arg in args:
        lower = arg.lower()
        if any(marker in lower for marker in _SECRET_MARKERS):
            sanitized.append("[REDACTED]")
        elif len(arg) > 32 and set(arg) <= _BASE64_CHARS:
            sanitized.append("[REDACTED_TOKEN]")
        elif "/" in arg or "\\" in arg:
            sanitized.append(sanitize_path(arg))
        else:
            sanitized.append(arg)
    return sanitized


def sanitize_env_var(name: str, value: str) -> Optional[str]:
    """
    Valor seguro para logar uma variável de ambiente.

    Returns:
        None para variáveis sensíveis (não logar), placeholder para
        semi-sensíveis, ou o próprio valor
    """
    lower = name.lower()

    if any(marker in lower for marker in _SENSITIVE_VARS):
        return None

    if any(marker in lower for marker in _SEMI_SENSITIVE_VARS):
        return f"[REDACTED_{name.upper()}_VALUE]"

    return value


# =============================================================================
# Debug Logging
# =============================================================================

def debug_log(enabled: bool, message: str) -> None:
    """Escreve 'samoyed: <message>' no stderr quando debug está ligado."""
    if enabled:
        err_console.print(f"samoyed: {message}")


def log_file_operation(env: Environment, enabled: bool, operation: str, path: PathLike) -> None:
    debug_log(enabled, f"{operation} file: {sanitize_path(path, env)}")


def log_command_execution(enabled: bool, program: str, args: Sequence[str]) -> None:
    debug_log(enabled, f"Executing command: {program} {sanitize_args(args)}")


__all__ = [
    "err_console",
    "sanitize_path",
    "sanitize_args",
    "sanitize_env_var",
    "debug_log",
    "log_file_operation",
    "log_command_execution",
]
