"""Model service configuration and client."""

from npcforge.api.llm_config import LLMConfig, LLMConfigManager
from npcforge.api.ollama_client import OllamaClient

__all__ = ["LLMConfig", "LLMConfigManager", "OllamaClient"]
