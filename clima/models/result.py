"""Explicit success/failure outcomes returned by collaborators."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")

NOT_FOUND_MESSAGE = "Cidade não encontrada"
GENERIC_ERROR_MESSAGE = "Erro ao buscar dados do clima"


class ErrorKind(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    NETWORK_OR_UPSTREAM = "NETWORK_OR_UPSTREAM"
    STORAGE = "STORAGE"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str


Outcome: TypeAlias = Ok[T] | Err


def error_message(exc: BaseException) -> str:
    """Human-readable text for an exception, or the generic fallback."""
    text = str(exc).strip()
    return text or GENERIC_ERROR_MESSAGE
