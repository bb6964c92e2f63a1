"""
SAMOYED - Hook Dispatcher
Executado pelo wrapper a cada disparo de hook do Git.

Fluxo por invocação:
1. SAMOYED/SAMOID: "0" sai com 0, "2" liga debug
2. Nome do hook = basename do primeiro argumento
3. Comando em samoyed.toml? (tier 1)
4. Senão, <hook_directory>/scripts/<hook> (tier 2); ausente = exit 0
5. Executa via shell e devolve o exit code exato do filho
"""

import os
from pathlib import Path, PurePath
from typing import List, Optional, Sequence

from ..config import (
    CONFIG_FILE_NAME,
    DEFAULT_HOOK_DIRECTORY,
    INIT_SCRIPT_DIR,
    INIT_SCRIPT_NAME,
    SCRIPTS_SUBDIR,
)
from ..core.config_loader import ConfigLoadError, load_optional_config
from ..core.environment import CommandRunner, Environment, FileSystem, Platform
from ..core.exit_codes import EX_CONFIG, EX_UNAVAILABLE, EX_USAGE, SamoyedError
from ..core.models import ExecutionContext, ExecutionMode, SamoyedConfig, ShellPlan
from ..core.sanitize import (
    debug_log,
    err_console,
    log_command_execution,
    log_file_operation,
    sanitize_args,
    sanitize_env_var,
    sanitize_path,
)
from .shell_select import select_for_command, select_for_script, uses_unix_shell


COMMAND_NOT_FOUND = 127
WINDOWS_SCRIPT_EXTENSIONS = (".ps1", ".bat", ".cmd")

# Variáveis que mudam a resolução (shell, init script); logadas em debug
DEBUG_ENV_VARS = (
    "MSYSTEM",
    "CYGWIN",
    "WSL_DISTRO_NAME",
    "WSL_INTEROP",
    "XDG_CONFIG_HOME",
    "APPDATA",
)


# =============================================================================
# Exceções
# =============================================================================

class DispatchError(SamoyedError):
    """Falha do próprio dispatcher (não do hook)."""
    pass


class NoHookNameError(DispatchError):
    exit_code = EX_USAGE

    def __init__(self):
        super().__init__(
            "No hook name provided in arguments",
            "This command is meant to be called by the wrapper scripts in core.hooksPath.",
        )


class ShellSpawnError(DispatchError):
    """O shell escolhido não pôde ser iniciado."""

    exit_code = EX_UNAVAILABLE

    def __init__(self, program: str, target: str, error: OSError):
        self.program = program
        self.error = error
        super().__init__(
            f"Failed to execute hook via '{program}': {target} ({error.strerror or error})",
            f"Make sure '{program}' is installed and in your PATH.",
        )


class HomeDirectoryError(DispatchError):
    exit_code = EX_CONFIG

    def __init__(self):
        super().__init__("Could not determine home directory (HOME/USERPROFILE not set)")


# =============================================================================
# Init Script
# =============================================================================

def resolve_init_script_path(env: Environment, platform: Platform) -> Path:
    """
    Localiza ~/.config/samoyed/init.sh respeitando os overrides.

    XDG_CONFIG_HOME tem prioridade; no Windows, APPDATA vem em seguida;
    por último HOME (ou USERPROFILE) + .config.

    Raises:
        HomeDirectoryError: Nenhuma raiz de configuração disponível
    """
    config_root = env.get("XDG_CONFIG_HOME")

    if not config_root and platform == Platform.WINDOWS:
        config_root = env.get("APPDATA")

    if not config_root:
        home = env.get("HOME") or env.get("USERPROFILE")
        if not home:
            raise HomeDirectoryError()
        config_root = str(Path(home) / ".config")

    return Path(config_root) / INIT_SCRIPT_DIR / INIT_SCRIPT_NAME


# =============================================================================
# Hook Dispatcher
# =============================================================================

class HookDispatcher:
    """
    Resolve e executa o hook pedido pelo Git.

    Responsabilidades:
    - Resolver modo (skip/normal/debug)
    - Resolver o comando (config primeiro, script depois)
    - Delegar a escolha do shell
    - Executar e repassar o exit code
    """

    def __init__(
        self,
        env: Environment,
        fs: FileSystem,
        runner: CommandRunner,
        platform: Optional[Platform] = None,
        config_path: str = CONFIG_FILE_NAME,
    ):
        self.env = env
        self.fs = fs
        self.runner = runner
        self.platform = platform or Platform.current()
        self.config_path = config_path

    def dispatch(self, args: Sequence[str]) -> int:
        """
        Processa uma invocação.

        Args:
            args: [nome-do-hook, *argumentos-do-git]

        Returns:
            Exit code a devolver ao Git

        Raises:
            NoHookNameError: Nenhum argumento recebido
            ShellSpawnError: O shell não pôde ser iniciado
        """
        mode = ExecutionMode.from_environment(self.env)
        if mode == ExecutionMode.SKIP:
            return 0

        debug = mode == ExecutionMode.DEBUG
        if debug:
            debug_log(True, "Debug mode enabled (SAMOYED=2)")
            debug_log(True, f"Hook runner args: {sanitize_args(args)}")

        context = self._build_context(args, mode)
        self._log_environment(context)

        config = self._load_config(context)
        if config is not None:
            if config.settings.skip_hooks:
                debug_log(context.debug, "skip_hooks = true in settings, exiting")
                return 0
            if config.settings.debug and not context.debug:
                context.mode = ExecutionMode.DEBUG
                debug_log(True, "Debug mode enabled (settings.debug)")
        else:
            debug_log(context.debug, f"No usable {self.config_path}, using defaults")

        hook = config.hook(context.hook_name) if config is not None else None
        if hook is not None and hook.has_command:
            return self._run_config_command(context, hook.command)

        return self._run_fallback_script(context, config)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def _build_context(self, args: Sequence[str], mode: ExecutionMode) -> ExecutionContext:
        if not args or not args[0]:
            raise NoHookNameError()

        # Windows e Unix: o wrapper pode passar um path completo
        hook_name = PurePath(args[0].replace("\\", "/")).name
        if not hook_name:
            raise NoHookNameError()

        context = ExecutionContext(hook_name=hook_name, hook_args=list(args[1:]), mode=mode)
        debug_log(context.debug, f"Detected hook name: {hook_name}")
        return context

    def _log_environment(self, context: ExecutionContext) -> None:
        if not context.debug:
            return

        for name in DEBUG_ENV_VARS:
            value = self.env.get(name)
            if value is None:
                continue
            safe_value = sanitize_env_var(name, value)
            if safe_value is not None:
                debug_log(True, f"Environment: {name}={safe_value}")

    def _load_config(self, context: ExecutionContext) -> Optional[SamoyedConfig]:
        """Config parcial ou ilegível nunca bloqueia o hook: segue sem comandos."""
        try:
            return load_optional_config(self.fs, self.config_path, strict=False)
        except ConfigLoadError as e:
            debug_log(context.debug, f"Ignoring {self.config_path}: {e.message}")
            return None

    def _run_config_command(self, context: ExecutionContext, command: str) -> int:
        debug_log(context.debug, f"Using command from {self.config_path}")
        self._detect_init_script(context)

        plan = select_for_command(
            self.platform,
            self.env,
            command,
            context.hook_name,
            context.hook_args,
            context.debug,
        )
        return self._execute(context, plan, target=f"{self.config_path} [{context.hook_name}]")

    def _run_fallback_script(self, context: ExecutionContext, config: Optional[SamoyedConfig]) -> int:
        hook_directory = config.settings.hook_directory if config else DEFAULT_HOOK_DIRECTORY
        script_path = self._find_fallback_script(context, hook_directory)

        if script_path is None:
            debug_log(context.debug, "Hook script not found, exiting silently")
            return 0

        plan = select_for_script(
            self.platform,
            self.env,
            str(script_path),
            context.hook_args,
            context.debug,
        )
        return self._execute(context, plan, target=sanitize_path(script_path, self.env))

    def _find_fallback_script(self, context: ExecutionContext, hook_directory: str) -> Optional[Path]:
        base = Path(hook_directory) / SCRIPTS_SUBDIR / context.hook_name
        candidates: List[Path] = [base]

        if not uses_unix_shell(self.platform, self.env):
            candidates += [base.with_name(base.name + ext) for ext in WINDOWS_SCRIPT_EXTENSIONS]

        for candidate in candidates:
            log_file_operation(self.env, context.debug, "Looking for hook script at", candidate)
            if self.fs.exists(candidate):
                return candidate
        return None

    def _detect_init_script(self, context: ExecutionContext) -> None:
        """
        Procura o init script do usuário.

        Só detecção: o script não é aplicado ao ambiente do filho, e isso
        aparece apenas no debug. Falhas aqui não interrompem o hook.
        """
        try:
            init_script = resolve_init_script_path(self.env, self.platform)
        except HomeDirectoryError as e:
            debug_log(context.debug, f"Skipping init script: {e.message}")
            return

        log_file_operation(self.env, context.debug, "Checking for init script at", init_script)
        if self.fs.exists(init_script):
            debug_log(context.debug, "Init script found but sourcing not implemented yet")
        else:
            debug_log(context.debug, "No init script found")

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def _execute(self, context: ExecutionContext, plan: ShellPlan, target: str) -> int:
        log_command_execution(context.debug, plan.program, plan.args)

        try:
            # Sem captura: stdout/stderr do hook passam direto
            result = self.runner.run(plan.program, list(plan.args), capture=False)
        except OSError as e:
            raise ShellSpawnError(plan.program, target, e)

        exit_code = normalize_exit_code(result.returncode)
        debug_log(context.debug, f"Hook script exit code: {exit_code}")

        if exit_code != 0:
            self._report_failure(context, exit_code)

        return exit_code

    def _report_failure(self, context: ExecutionContext, exit_code: int) -> None:
        err_console.print(f"samoyed - {context.hook_name} script failed (code {exit_code})")

        if exit_code != COMMAND_NOT_FOUND:
            return

        err_console.print("samoyed - command not found in PATH")
        if context.debug:
            # Só a contagem: o conteúdo do PATH expõe o layout do sistema
            path_value = self.env.get("PATH") or ""
            dir_count = len([p for p in path_value.split(os.pathsep) if p])
            err_console.print(f"samoyed - PATH contains {dir_count} directories")
        else:
            err_console.print("samoyed - run with SAMOYED=2 for more details")


# =============================================================================
# Helper Functions
# =============================================================================

def normalize_exit_code(returncode: int) -> int:
    """Filho morto por sinal N (returncode -N) vira 128+N, como nos shells."""
    if returncode < 0:
        return 128 + abs(returncode)
    return returncode


def dispatch(
    args: Sequence[str],
    env: Environment,
    fs: FileSystem,
    runner: CommandRunner,
    platform: Optional[Platform] = None,
) -> int:
    """Helper: executa uma invocação do dispatcher."""
    return HookDispatcher(env, fs, runner, platform).dispatch(args)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "HookDispatcher",
    "DispatchError",
    "NoHookNameError",
    "ShellSpawnError",
    "HomeDirectoryError",
    "resolve_init_script_path",
    "normalize_exit_code",
    "dispatch",
]
