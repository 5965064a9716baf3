"""Exceções compartilhadas entre camadas."""

from __future__ import annotations


class InvalidPayloadError(ValueError):
    """Payload de webhook não é um objeto JSON.

    Violação do contrato de entrada: o despacho nem começa. Objetos com
    campos ausentes ou malformados não levantam; apenas não casam.
    """

    def __init__(self, message: str = "Invalid payload: expected an object") -> None:
        super().__init__(message)


class DuplicateProcessorIdError(ValueError):
    """Dois processadores registrados com o mesmo id."""

    def __init__(self, processor_id: str) -> None:
        super().__init__(f"Duplicate processor id: {processor_id}")
        self.processor_id = processor_id


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class NotionUnavailableError(InfrastructureError):
    """API do Notion indisponível após esgotar as tentativas."""


class NotionApiError(Exception):
    """Erro retornado pela API do Notion.

    Attributes:
        status_code: Status HTTP da resposta
        code: Código de erro do Notion (ex: "object_not_found")
        is_permanent: False para erros transitórios (409, 429, 5xx)
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: str = "unknown",
        is_permanent: bool = True,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.is_permanent = is_permanent

    def __str__(self) -> str:
        return f"{self.status_code} {self.code}: {self.args[0]}"
