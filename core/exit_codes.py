"""
SAMOYED - Exit Codes
Códigos de saída no estilo sysexits.h e a exceção base do projeto.

Cada erro carrega o próprio exit code e a sugestão desde o ponto de origem;
nenhuma classificação por texto da mensagem acontece depois.
"""

from typing import Optional


# =============================================================================
# sysexits.h
# =============================================================================

EX_OK = 0
EX_USAGE = 64        # uso incorreto / argumento inválido
EX_DATAERR = 65      # dado inválido (path com traversal, absoluto...)
EX_NOINPUT = 66      # entrada ausente (não é repositório git)
EX_UNAVAILABLE = 69  # serviço indisponível (git ou shell ausente)
EX_SOFTWARE = 70     # erro interno não classificado
EX_IOERR = 74        # falha de I/O
EX_TEMPFAIL = 75     # falha temporária, usuário pode tentar de novo
EX_NOPERM = 77       # permissão negada
EX_CONFIG = 78       # configuração inválida


# =============================================================================
# Base Exception
# =============================================================================

class SamoyedError(Exception):
    """Erro base: mensagem de uma linha + sugestão opcional + exit code."""

    exit_code = EX_SOFTWARE

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def describe(self) -> str:
        """Mensagem completa para o usuário (com sugestão, se houver)."""
        if self.suggestion:
            return f"{self.message}\n\n{self.suggestion}"
        return self.message


def exit_code_for(error: BaseException) -> int:
    """
    Mapeia uma exceção para o exit code do processo.

    Args:
        error: Exceção capturada no topo da CLI

    Returns:
        Exit code sysexits
    """
    if isinstance(error, SamoyedError):
        return error.exit_code
    if isinstance(error, OSError):
        return EX_IOERR
    return EX_SOFTWARE


__all__ = [
    "EX_OK",
    "EX_USAGE",
    "EX_DATAERR",
    "EX_NOINPUT",
    "EX_UNAVAILABLE",
    "EX_SOFTWARE",
    "EX_IOERR",
    "EX_TEMPFAIL",
    "EX_NOPERM",
    "EX_CONFIG",
    "SamoyedError",
    "exit_code_for",
]
