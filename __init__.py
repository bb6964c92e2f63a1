"""
🐕 SAMOYED - Git Hooks Manager

Instala wrappers em core.hooksPath e despacha cada hook do Git para o
comando configurado em samoyed.toml ou para um script de fallback.
"""

from .__version__ import __version__

__all__ = ["__version__"]
