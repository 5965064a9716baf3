"""Kill-switch comum aos processadores."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.processor import EventPredicate
    from config.settings import NotionSettings


def enabled_when_configured(
    settings: NotionSettings,
    processor_id: str,
    database_id: str,
) -> EventPredicate:
    """Habilitado se o database alvo está configurado e o id não foi desligado."""

    def _is_enabled(_event: object) -> bool:
        return bool(database_id) and not settings.is_processor_disabled(processor_id)

    return _is_enabled
