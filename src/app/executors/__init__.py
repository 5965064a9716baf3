"""Executores de processadores: efeitos colaterais por evento casado.

Cada executor é um callable assíncrono `(event) -> bool`. Falhas esperadas
(API do Notion, IA) retornam False; inesperadas ficam com o despacho.
"""

from app.executors.insert_test_table import InsertTestTableExecutor
from app.executors.property_research import PropertyResearchExecutor, extract_address
from app.executors.small_business_acquisition import log_new_acquisition

__all__ = [
    "InsertTestTableExecutor",
    "PropertyResearchExecutor",
    "extract_address",
    "log_new_acquisition",
]
