"""
SAMOYED - Init Command
Configura samoyed no repositório: samoyed.toml + instalação dos hooks.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import CONFIG_FILE_NAME, DEFAULT_HOOK_DIRECTORY, ENV_VERBOSE
from ..core.config_loader import ConfigLoadError, dump_config, load_optional_config
from ..core.environment import CommandRunner, Environment, FileSystem, Platform
from ..core.models import ExecutionMode, SamoyedConfig
from ..core.project import ProjectType
from ..vcs.git_config import GitConfigurator
from .install import HookIOError, InstallResult, install_hooks, print_install_summary
from .validation import validate_hooks_directory_path


console = Console(markup=False, highlight=False, soft_wrap=True)


@dataclass
class InitResult:
    """Resumo do que o init fez."""
    config_path: Path
    config_created: bool
    project_type: Optional[ProjectType] = None
    install: Optional[InstallResult] = None
    bypassed: bool = False


def init_command(
    env: Environment,
    runner: CommandRunner,
    fs: FileSystem,
    project_type_hint: Optional[str] = None,
    dirname: str = DEFAULT_HOOK_DIRECTORY,
    platform: Optional[Platform] = None,
) -> InitResult:
    """
    Inicializa samoyed no diretório atual.

    1. SAMOYED=0 → não faz nada
    2. Valida o nome do diretório (antes de qualquer escrita)
    3. Exige um repositório git
    4. Cria samoyed.toml se ainda não existir
    5. Instala os hooks

    Args:
        env: Ambiente
        runner: Executor de comandos
        fs: Filesystem
        project_type_hint: Tipo de projeto (ex: "rust"); None = auto-detecta
        dirname: Diretório base dos hooks
        platform: Plataforma alvo

    Returns:
        InitResult

    Raises:
        SamoyedError: Qualquer falha de validação, git ou I/O
    """
    config_path = Path(CONFIG_FILE_NAME)
    verbose = env.get(ENV_VERBOSE) == "1"

    if ExecutionMode.from_environment(env) == ExecutionMode.SKIP:
        console.print("Bypassing samoyed init (SAMOYED=0)")
        return InitResult(config_path=config_path, config_created=False, bypassed=True)

    validate_hooks_directory_path(dirname, platform)
    GitConfigurator(runner, fs).check_repository()

    result = InitResult(config_path=config_path, config_created=False)

    if fs.exists(config_path):
        _say(verbose, "🔧", f"{CONFIG_FILE_NAME} already exists. Updating configuration...")
        _warn_hook_directory_mismatch(fs, dirname)
    else:
        project_type = _resolve_project_type(fs, project_type_hint)
        config = SamoyedConfig.default_for_project_type(project_type)
        config.settings.hook_directory = dirname

        errors = config.validate()
        if errors:
            raise ConfigLoadError(f"generated configuration is invalid: {'; '.join(errors)}")

        try:
            fs.write_text(config_path, dump_config(config))
        except OSError as e:
            raise HookIOError(e, config_path)

        result.config_created = True
        result.project_type = project_type
        suffix = " (verbose mode)" if verbose else ""
        console.print(
            f"✅ Created {CONFIG_FILE_NAME} with {project_type.display_name} defaults{suffix}"
        )

    result.install = install_hooks(env, runner, fs, dirname, platform)
    if verbose:
        print_install_summary(result.install, console)

    console.print("✅ samoyed is ready! Edit samoyed.toml to customize your hooks.")
    return result


def _resolve_project_type(fs: FileSystem, hint: Optional[str]) -> ProjectType:
    if hint is None:
        return ProjectType.auto_detect(fs)

    project_type = ProjectType.from_string(hint)
    if project_type is None:
        console.print(f"Warning: Unknown project type '{hint}', auto-detecting...", style="yellow")
        return ProjectType.auto_detect(fs)
    return project_type


def _say(verbose: bool, icon: str, message: str) -> None:
    console.print(f"{icon} {message}" if verbose else message)


def _warn_hook_directory_mismatch(fs: FileSystem, dirname: str) -> None:
    """Avisa quando o dispatcher vai procurar scripts em outro diretório."""
    try:
        existing = load_optional_config(fs, CONFIG_FILE_NAME, strict=False)
    except ConfigLoadError:
        return

    if existing is None or existing.settings.hook_directory == dirname:
        return

    console.print(
        f"Warning: {CONFIG_FILE_NAME} sets hook_directory = \"{existing.settings.hook_directory}\"; "
        f"scripts in {dirname}/scripts will not run until it is changed to \"{dirname}\".",
        style="yellow",
    )


__all__ = ["InitResult", "init_command"]
