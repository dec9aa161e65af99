"""LLM configuration and management."""

from typing import Any, Optional
from urllib.parse import urljoin

from pydantic import BaseModel, ConfigDict, Field

from npcforge.config import (
    DEFAULT_LLM_MODEL,
    DEFAULT_LLM_NUM_PREDICT,
    DEFAULT_LLM_OUTPUT_FORMAT,
    DEFAULT_LLM_TEMPERATURE,
    DEFAULT_LLM_TIMEOUT,
    DEFAULT_LLM_TOP_K,
    DEFAULT_LLM_TOP_P,
    DEFAULT_OLLAMA_BASE_URL,
    DEFAULT_OLLAMA_GENERATE_PATH,
    DEFAULT_REQUEST_DELAY,
)


class LLMConfig(BaseModel):
    """LLM configuration model."""

    model_config = ConfigDict(frozen=True)  # Process-wide constant

    base_url: str = Field(default=DEFAULT_OLLAMA_BASE_URL, description="Ollama base URL")
    model: str = Field(default=DEFAULT_LLM_MODEL, description="Model name")
    output_format: str = Field(
        default=DEFAULT_LLM_OUTPUT_FORMAT, description="Output format hint sent to Ollama"
    )
    temperature: float = Field(
        default=DEFAULT_LLM_TEMPERATURE, ge=0.0, le=2.0, description="Temperature"
    )
    top_p: float = Field(default=DEFAULT_LLM_TOP_P, ge=0.0, le=1.0, description="Nucleus sampling")
    top_k: int = Field(default=DEFAULT_LLM_TOP_K, ge=1, description="Top-k sampling cutoff")
    num_predict: int = Field(
        default=DEFAULT_LLM_NUM_PREDICT, ge=1, description="Maximum output tokens"
    )
    timeout: int = Field(default=DEFAULT_LLM_TIMEOUT, ge=1, description="Timeout in seconds")
    request_delay: float = Field(
        default=DEFAULT_REQUEST_DELAY, ge=0.0, description="Pause between attempts in seconds"
    )

    @property
    def generate_url(self) -> str:
        """Full URL of the generate endpoint."""
        base = self.base_url if self.base_url.endswith("/") else f"{self.base_url}/"
        return urljoin(base, DEFAULT_OLLAMA_GENERATE_PATH)

    def sampling_options(self) -> dict[str, Any]:
        """Sampling options as sent in the request payload."""
        return {
            "temperature": self.temperature,
            "top_p": self.top_p,
            "top_k": self.top_k,
            "num_predict": self.num_predict,
        }


class LLMConfigManager:
    """Holds the configuration for a run."""

    def __init__(self, initial_config: Optional[LLMConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = initial_config or LLMConfig()

    @property
    def config(self) -> LLMConfig:
        """Get current config."""
        return self._config

    def override(self, **changes: Any) -> LLMConfig:
        """Replace the config with a copy carrying the given non-None changes."""
        updates = {key: value for key, value in changes.items() if value is not None}
        if updates:
            self._config = self._config.model_copy(update=updates)
        return self._config
