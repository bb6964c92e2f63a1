"""
SAMOYED - Config Loader
Carrega, valida e serializa samoyed.toml.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli_w

from ..config import CONFIG_FILE_NAME
from .environment import FileSystem
from .exit_codes import EX_CONFIG, SamoyedError
from .models import SamoyedConfig, SamoyedSettings


# =============================================================================
# Exceções
# =============================================================================

class ConfigLoadError(SamoyedError):
    """samoyed.toml ilegível ou inválido."""

    exit_code = EX_CONFIG

    def __init__(self, message: str, source: str = CONFIG_FILE_NAME):
        self.source = source
        super().__init__(
            f"Invalid configuration in {source}: {message}",
            f"Fix {source} or regenerate it with 'samoyed init'.",
        )


# =============================================================================
# Loader
# =============================================================================

class ConfigLoader:
    """
    Converte o TOML de samoyed.toml em SamoyedConfig.

    Responsabilidades:
    - Ler o arquivo via FileSystem
    - Parsear TOML
    - Validar tipos de cada campo
    - Rodar SamoyedConfig.validate()

    Com strict=False (usado pelo dispatcher) só erros de leitura e de
    sintaxe TOML são reportados: tabela [hooks] ausente, chaves
    desconhecidas e valores de tipo errado são ignorados.
    """

    _BOOL_SETTINGS = ("debug", "fail_fast", "skip_hooks")

    def __init__(self, fs: FileSystem, strict: bool = True):
        self.fs = fs
        self.strict = strict

    def load_from_file(self, path: Union[str, Path] = CONFIG_FILE_NAME) -> SamoyedConfig:
        """
        Carrega config de um arquivo.

        Raises:
            ConfigLoadError: Arquivo ausente, TOML inválido ou config inválida
        """
        source = str(path)

        if not self.fs.exists(path):
            raise ConfigLoadError("file not found", source)

        try:
            text = self.fs.read_text(path)
        except OSError as e:
            raise ConfigLoadError(f"could not read file ({e})", source)

        return self.load_from_string(text, source)

    def load_from_string(self, text: str, source: str = CONFIG_FILE_NAME) -> SamoyedConfig:
        """Parseia TOML já lido."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(f"TOML syntax error ({e})", source)

        return self.load_from_dict(data, source)

    def load_from_dict(self, data: Dict[str, Any], source: str = CONFIG_FILE_NAME) -> SamoyedConfig:
        """Converte o dict parseado em SamoyedConfig (validado quando strict)."""
        hooks_data = data.get("hooks")
        if not isinstance(hooks_data, dict):
            if self.strict:
                raise ConfigLoadError("missing [hooks] table", source)
            hooks_data = {}

        hooks: Dict[str, str] = {}
        for name, command in hooks_data.items():
            if not isinstance(command, str):
                if self.strict:
                    raise ConfigLoadError(f"hook '{name}' must be a string command", source)
                continue
            hooks[name] = command

        settings = self._load_settings(data.get("settings", {}), source)
        config = SamoyedConfig(hooks=hooks, settings=settings)

        if self.strict:
            errors = config.validate()
            if errors:
                raise ConfigLoadError("; ".join(errors), source)
        elif not _is_safe_hook_directory(settings.hook_directory):
            settings.hook_directory = SamoyedSettings().hook_directory

        return config

    def _load_settings(self, data: Any, source: str) -> SamoyedSettings:
        settings = SamoyedSettings()

        if not isinstance(data, dict):
            if self.strict:
                raise ConfigLoadError("[settings] must be a table", source)
            return settings

        if "hook_directory" in data:
            if isinstance(data["hook_directory"], str):
                settings.hook_directory = data["hook_directory"]
            elif self.strict:
                raise ConfigLoadError("settings.hook_directory must be a string", source)

        for key in self._BOOL_SETTINGS:
            if key not in data:
                continue
            if isinstance(data[key], bool):
                setattr(settings, key, data[key])
            elif self.strict:
                raise ConfigLoadError(f"settings.{key} must be true or false", source)

        return settings


def _is_safe_hook_directory(path: str) -> bool:
    from ..hooks.validation import PathValidationError, validate_hooks_directory_path

    try:
        validate_hooks_directory_path(path)
    except PathValidationError:
        return False
    return True


# =============================================================================
# Helper Functions
# =============================================================================

def load_config(fs: FileSystem, path: Union[str, Path] = CONFIG_FILE_NAME) -> SamoyedConfig:
    """Carrega samoyed.toml (erro se ausente)."""
    return ConfigLoader(fs).load_from_file(path)


def load_optional_config(
    fs: FileSystem,
    path: Union[str, Path] = CONFIG_FILE_NAME,
    strict: bool = True,
) -> Optional[SamoyedConfig]:
    """
    Carrega samoyed.toml se existir.

    Args:
        fs: Filesystem
        path: Caminho do arquivo
        strict: False aceita config parcial (sem validate)

    Returns:
        SamoyedConfig, ou None quando o arquivo não existe

    Raises:
        ConfigLoadError: Arquivo ilegível, TOML inválido ou (strict) config inválida
    """
    if not fs.exists(path):
        return None
    return ConfigLoader(fs, strict).load_from_file(path)


def dump_config(config: SamoyedConfig) -> str:
    """Serializa a config em TOML."""
    return tomli_w.dumps(config.to_dict())


__all__ = [
    "ConfigLoader",
    "ConfigLoadError",
    "load_config",
    "load_optional_config",
    "dump_config",
]
