"""
Model-backed analysis.
Builds prompts from file content or a project map and sends them to a chat model.
"""

from .analyzer import NO_RESULT_MESSAGE, analyze_content, analyze_project
from .client import ChatClient, OllamaChatClient, OpenAIChatClient, create_client

__all__ = [
    "analyze_content",
    "analyze_project",
    "NO_RESULT_MESSAGE",
    "ChatClient",
    "OpenAIChatClient",
    "OllamaChatClient",
    "create_client",
]
