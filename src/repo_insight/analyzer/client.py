"""
Chat clients for the remote model endpoint.
The analyzer only needs complete(model, messages) -> reply text, so tests
can hand it any object with that method.
"""

from typing import Protocol

from ..config import Settings

Message = dict[str, str]


class ChatClient(Protocol):
    label: str  # provider name used in the no-result message

    def complete(self, model: str, messages: list[Message]) -> str:
        ...


class OpenAIChatClient:
    """OpenAI chat completions; returns the first choice's message content."""

    label = "OpenAI"

    def __init__(self, api_key: str, *, store: bool = True, client=None):
        if client is None:
            from openai import OpenAI
            client = OpenAI(api_key=api_key)
        self._client = client
        self.store = store

    def complete(self, model: str, messages: list[Message]) -> str:
        completion = self._client.chat.completions.create(
            model=model,
            messages=messages,
            store=self.store,
        )
        content = completion.choices[0].message.content
        if content is None:
            raise ValueError("Completion has no message content")
        return content


class OllamaChatClient:
    """Ollama chat API (local server unless host is given)."""

    label = "Ollama"

    def __init__(self, host: str | None = None, *, client=None):
        if client is None:
            from ollama import Client
            client = Client(host=host)
        self._client = client
        self.host = host

    def complete(self, model: str, messages: list[Message]) -> str:
        response = self._client.chat(model=model, messages=messages)
        content = (response.get("message") or {}).get("content")
        if content is None:
            raise ValueError("Ollama response has no message content")
        return content


def create_client(settings: Settings) -> ChatClient | None:
    """
    Build the client for the configured provider.
    Returns None when OpenAI is selected but OPENAI_API_KEY is not set.
    """
    if settings.provider == "ollama":
        return OllamaChatClient(host=settings.ollama_host)
    if not settings.openai_api_key:
        return None
    return OpenAIChatClient(api_key=settings.openai_api_key)
