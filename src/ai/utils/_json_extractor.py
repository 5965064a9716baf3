"""Extrator de JSON de respostas de LLM.

Respostas podem vir envolvidas em blocos markdown ou com texto antes e
depois do objeto.
"""

from __future__ import annotations

import json
from typing import Any

_DECODER = json.JSONDecoder()


def _strip_code_fence(text: str) -> str:
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def extract_json_from_response(response: str) -> dict[str, Any] | None:
    """Extrai o primeiro objeto JSON da resposta.

    Args:
        response: Resposta bruta da LLM

    Returns:
        Dict extraído ou None se não houver objeto JSON
    """
    if not response or not isinstance(response, str):
        return None

    text = _strip_code_fence(response.strip())

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, dict):
        return data

    # Objeto embutido em texto (aceita aninhamento)
    start = text.find("{")
    while start != -1:
        try:
            data, _end = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            data = None
        if isinstance(data, dict):
            return data
        start = text.find("{", start + 1)

    return None
