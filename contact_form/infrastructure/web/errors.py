"""Map domain failures to the ``{"error": ...}`` response body."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from contact_form.domain.errors import (
    MessageNotFoundError,
    StorageError,
    StorageInterruptedError,
)

NOT_FOUND = "Mensagem não encontrada."


@dataclass(frozen=True)
class _OperationTexts:
    interrupted: str
    failure_prefix: str


class Operation(Enum):
    CREATE = _OperationTexts("Envio interrompido, tente novamente.", "Falha ao registrar mensagem")
    LIST = _OperationTexts("Consulta interrompida, tente novamente.", "Falha ao consultar mensagens")
    UPDATE = _OperationTexts("Atualização interrompida, tente novamente.", "Falha ao atualizar mensagem")
    DELETE = _OperationTexts("Exclusão interrompida, tente novamente.", "Falha ao excluir mensagem")


class ErrorResponse(BaseModel):
    error: str


class ApiError(Exception):
    def __init__(self, status_code: int, error: str) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error


@contextmanager
def translate_errors(operation: Operation):
    try:
        yield
    except MessageNotFoundError as e:
        raise ApiError(404, NOT_FOUND) from e
    except StorageInterruptedError as e:
        raise ApiError(500, operation.value.interrupted) from e
    except StorageError as e:
        raise ApiError(500, f"{operation.value.failure_prefix}: {e.cause}") from e


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.error})
