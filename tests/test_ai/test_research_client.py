"""Testes para ResearchClient (OpenAI mockado)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from ai.models import PropertyResearchResult, SurroundingsResearchResult
from app.infra.ai import ResearchClient
from config.settings import OpenAISettings


def _completion(content: str | None, *, usage: bool = True) -> SimpleNamespace:
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=(
            SimpleNamespace(prompt_tokens=10, completion_tokens=5, total_tokens=15)
            if usage
            else None
        ),
    )


def _client(create: AsyncMock) -> ResearchClient:
    openai = MagicMock()
    openai.chat.completions.create = create
    return ResearchClient(
        settings=OpenAISettings(api_key="sk-test", research_model="gpt-4o"),
        client=openai,
    )


async def _research(client: ResearchClient, model=PropertyResearchResult):
    return await client.research(
        system_prompt="system",
        user_prompt="user",
        response_model=model,
        operation="property_research",
    )


class TestResearchClient:
    @pytest.mark.asyncio
    async def test_returns_validated_model(self) -> None:
        create = AsyncMock(
            return_value=_completion('{"filled_properties": {"Bedrooms": 3}, "sources": []}')
        )
        result = await _research(_client(create))

        assert isinstance(result, PropertyResearchResult)
        assert result.filled_properties == {"Bedrooms": 3}
        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}

    @pytest.mark.asyncio
    async def test_accepts_fenced_json(self) -> None:
        content = '```json\n{"filled_properties": {"Heating": "Gas"}}\n```'
        result = await _research(_client(AsyncMock(return_value=_completion(content))))
        assert result is not None
        assert result.filled_properties == {"Heating": "Gas"}

    @pytest.mark.asyncio
    async def test_api_error_returns_none(self, caplog: pytest.LogCaptureFixture) -> None:
        create = AsyncMock(side_effect=RuntimeError("boom"))
        with caplog.at_level("WARNING"):
            assert await _research(_client(create)) is None
        assert "research_openai_error" in caplog.text

    @pytest.mark.asyncio
    async def test_empty_response_returns_none(self) -> None:
        create = AsyncMock(return_value=_completion(None, usage=False))
        assert await _research(_client(create)) is None

    @pytest.mark.asyncio
    async def test_non_json_returns_none(self) -> None:
        create = AsyncMock(return_value=_completion("I could not find anything."))
        assert await _research(_client(create)) is None

    @pytest.mark.asyncio
    async def test_schema_mismatch_returns_none(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        create = AsyncMock(return_value=_completion('{"nearby_parks": []}'))
        with caplog.at_level("WARNING"):
            result = await _research(_client(create), SurroundingsResearchResult)
        assert result is None
        assert "research_schema_mismatch" in caplog.text

    @pytest.mark.asyncio
    async def test_aclose_closes_underlying_client(self) -> None:
        openai = MagicMock()
        openai.close = AsyncMock()
        client = ResearchClient(settings=OpenAISettings(api_key="sk-test"), client=openai)
        await client.aclose()
        openai.close.assert_awaited_once()
