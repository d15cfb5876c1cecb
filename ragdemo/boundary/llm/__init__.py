"""Chat model boundary layer."""

from ragdemo.boundary.llm.chat_client import LangChainChatClient, get_chat_client

__all__ = ["LangChainChatClient", "get_chat_client"]
