"""Camada de IA: prompts, contratos de saída e utilitários de parsing."""
