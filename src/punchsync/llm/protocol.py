"""Minimal LLM client protocol for the monthly insight."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LLMClient(Protocol):
    """Protocol for chat completion calls returning a content string."""

    def chat_completions_create(
        self,
        *,
        model: str,
        messages: list[dict[str, Any]],
    ) -> str:
        """Return the content string from the first choice."""
        ...


class OpenAILLMClient:
    """Adapter wrapping the OpenAI SDK client."""

    def __init__(self, openai_client: Any | None = None, api_key: str | None = None) -> None:
        if openai_client is not None:
            self._client = openai_client
        else:
            from openai import OpenAI  # lazy import

            self._client = OpenAI(api_key=api_key)

    def chat_completions_create(
        self,
        *,
        model: str,
        messages: list[dict[str, Any]],
    ) -> str:
        response = self._client.chat.completions.create(model=model, messages=messages)
        return response.choices[0].message.content or ""
