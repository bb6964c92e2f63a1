"""
SAMOYED - Command Line Interface
Entry point principal: `samoyed init` e `samoyed hook`.
"""

from typing import List, Optional

import typer
from rich.console import Console

from samoyed import __version__
from samoyed.config import DEFAULT_HOOK_DIRECTORY
from samoyed.core.environment import SystemCommandRunner, SystemEnvironment, SystemFileSystem
from samoyed.core.exit_codes import EX_USAGE, SamoyedError, exit_code_for
from samoyed.hooks.init import init_command
from samoyed.wrappers.dispatch import dispatch


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="samoyed",
    help="🐕 samoyed - Git hooks manager",
    add_completion=False,
    invoke_without_command=True,
    no_args_is_help=False,
)

console = Console(markup=False, highlight=False, soft_wrap=True)
err_console = Console(stderr=True, markup=False, highlight=False, soft_wrap=True)


def _fail(error: Exception) -> typer.Exit:
    message = error.describe() if isinstance(error, SamoyedError) else str(error)
    err_console.print(f"Error: {message}")
    return typer.Exit(exit_code_for(error))


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(f"samoyed {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Mostra versão do samoyed",
    ),
):
    """
    🐕 samoyed - Git hooks manager

    Instala wrappers em core.hooksPath e roda os comandos de samoyed.toml.
    """
    if ctx.invoked_subcommand is None:
        err_console.print("Error: No command specified. Use 'samoyed init' to get started.")
        raise typer.Exit(EX_USAGE)


# =============================================================================
# Command: init
# =============================================================================

@app.command()
def init(
    dirname: str = typer.Argument(
        DEFAULT_HOOK_DIRECTORY,
        help="Diretório dos hooks (relativo à raiz do repositório)",
    ),
    project_type: Optional[str] = typer.Option(
        None,
        "--project-type",
        "-p",
        help="Tipo de projeto: rust, go, node, python (default: auto-detecta)",
    ),
):
    """
    🪝 Inicializa samoyed no repositório atual

    Exemplos:

    \b
    # Diretório padrão (.samoyed)
    samoyed init

    \b
    # Diretório e tipo de projeto explícitos
    samoyed init -p rust .hooks
    """
    try:
        init_command(
            SystemEnvironment(),
            SystemCommandRunner(),
            SystemFileSystem(),
            project_type_hint=project_type,
            dirname=dirname,
        )
    except (SamoyedError, OSError) as e:
        raise _fail(e)


# =============================================================================
# Command: hook
# =============================================================================

@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def hook(
    args: Optional[List[str]] = typer.Argument(
        None,
        help="Nome do hook seguido dos argumentos passados pelo Git",
    ),
):
    """
    ⚡ Executa um hook (chamado pelos wrappers em core.hooksPath)

    Exemplo:

    \b
    samoyed hook pre-commit
    """
    try:
        exit_code = dispatch(
            args or [],
            SystemEnvironment(),
            SystemFileSystem(),
            SystemCommandRunner(),
        )
    except (SamoyedError, OSError) as e:
        raise _fail(e)

    raise typer.Exit(exit_code)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
