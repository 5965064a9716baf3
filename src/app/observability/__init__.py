"""Observabilidade: correlation_id e métricas via logs estruturados.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_dispatch_outcome
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADERS,
    correlation_id_from_headers,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_dispatch_outcome,
    record_latency,
    record_token_usage,
)

__all__ = [
    "CORRELATION_ID_HEADERS",
    "correlation_id_from_headers",
    "generate_correlation_id",
    "get_correlation_id",
    "record_dispatch_outcome",
    "record_latency",
    "record_token_usage",
    "reset_correlation_id",
    "set_correlation_id",
]
