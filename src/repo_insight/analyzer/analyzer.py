"""
Send file content or a project structure to the model for analysis.
The caller passes the chat client in; None means no credential was configured.
"""

import json
import logging
from typing import Any

from ..config import DEFAULT_MODELS
from ..results import FailureKind, MissingCredentialError, Outcome
from .client import ChatClient, Message

logger = logging.getLogger(__name__)

DEFAULT_MODEL = DEFAULT_MODELS["openai"]

SYSTEM_PROMPT = "You are an AI assistant that helps analyze code."

DEFAULT_CONTENT_PROMPT = "Please analyze the following file content:"

PROJECT_PROMPT_TEMPLATE = "Here is my project structure: {structure}"

NO_RESULT_TEMPLATE = "No result from {label} due to an error. Please check the logs for more details."

# What callers match on for the default provider
NO_RESULT_MESSAGE = NO_RESULT_TEMPLATE.format(label="OpenAI")


def no_result_message(client: ChatClient) -> str:
    return NO_RESULT_TEMPLATE.format(label=getattr(client, "label", "OpenAI"))


def build_messages(user_content: str) -> list[Message]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_content},
    ]


def build_content_prompt(content: str, custom_prompt: str | None = None) -> str:
    """Prompt (or the default instruction), a blank line, then the content."""
    return f"{custom_prompt or DEFAULT_CONTENT_PROMPT}\n\n{content}"


def build_project_prompt(structure: dict[str, Any], custom_prompt: str | None = None) -> str:
    """A custom prompt replaces the structure entirely."""
    if custom_prompt:
        return custom_prompt
    compact = json.dumps(structure, separators=(",", ":"), ensure_ascii=False)
    return PROJECT_PROMPT_TEMPLATE.format(structure=compact)


def _log_remote_failure(exc: Exception) -> None:
    logger.error("Error calling the model API:")
    status = getattr(exc, "status_code", None)
    if status is not None:
        logger.error("Status: %s", status)
    payload = getattr(exc, "body", None) or getattr(exc, "error", None)
    if payload:
        logger.error("Response Data: %s", payload)
    logger.error("Error Message: %s", exc)


def _ask(client: ChatClient | None, model: str, user_content: str) -> Outcome[str]:
    if client is None:
        raise MissingCredentialError("OPENAI_API_KEY environment variable not set.")
    try:
        reply = client.complete(model, build_messages(user_content))
    except Exception as e:
        _log_remote_failure(e)
        return Outcome.fail(FailureKind.REMOTE_CALL, no_result_message(client))
    return Outcome.success(reply)


def analyze_content(
    client: ChatClient | None,
    content: str,
    model: str = DEFAULT_MODEL,
    custom_prompt: str | None = None,
) -> Outcome[str]:
    """
    Ask the model to analyze a blob of text (usually one file).
    The content is sent as-is, however large.
    """
    return _ask(client, model, build_content_prompt(content, custom_prompt))


def analyze_project(
    client: ChatClient | None,
    structure: dict[str, Any],
    model: str = DEFAULT_MODEL,
    custom_prompt: str | None = None,
) -> Outcome[str]:
    """Ask the model to analyze a project map from scan_project."""
    return _ask(client, model, build_project_prompt(structure, custom_prompt))
