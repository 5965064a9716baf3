"""Conector do Notion: API REST e webhooks."""
