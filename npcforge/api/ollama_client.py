"""HTTP client for Ollama's generate endpoint."""

import json
import logging
import time
from typing import Any, Optional

import requests

from npcforge.api.llm_config import LLMConfig
from npcforge.config import DEFAULT_ENVELOPE_EXCERPT_LENGTH
from npcforge.errors import ModelConnectionError, TransportParseError

logger = logging.getLogger(__name__)


class OllamaClient:
    """Sends one non-streaming generate request per call."""

    def __init__(self, config: Optional[LLMConfig] = None, session: Optional[requests.Session] = None) -> None:
        """
        Initialize client.

        Args:
            config: LLM configuration (defaults from environment if None)
            session: Optional requests session, module-level requests is used if None
        """
        self.config = config or LLMConfig()
        self._http = session if session is not None else requests

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Request body for the generate endpoint."""
        return {
            "model": self.config.model,
            "prompt": prompt,
            "stream": False,
            "format": self.config.output_format,
            "options": self.config.sampling_options(),
        }

    def generate(self, prompt: str) -> str:
        """
        Request a generation and return the model's raw ``response`` text.

        Raises:
            ModelConnectionError: if the endpoint cannot be reached or times out
            TransportParseError: if the envelope is not JSON with a ``response`` string
        """
        url = self.config.generate_url
        payload = self.build_payload(prompt)
        logger.info(f"Requesting generation from {url} with model {self.config.model}")
        logger.debug(f"Prompt length: {len(prompt)} characters")

        started = time.monotonic()
        try:
            response = self._http.post(url, json=payload, timeout=self.config.timeout)
        except requests.exceptions.Timeout as e:
            raise ModelConnectionError(
                f"Ollama at {url} did not answer within {self.config.timeout} seconds", url
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise ModelConnectionError(
                f"Failed to connect to Ollama at {url}. Is it running? (start it with 'ollama serve')",
                url,
            ) from e
        except requests.exceptions.RequestException as e:
            raise ModelConnectionError(f"Request to Ollama at {url} failed: {e}", url) from e

        logger.debug(
            f"Ollama answered with HTTP {response.status_code} in {time.monotonic() - started:.1f}s"
        )
        return self.extract_response(response.text, response.status_code)

    @staticmethod
    def extract_response(body: str, status_code: Optional[int] = None) -> str:
        """Pull the inner ``response`` string out of the envelope."""
        excerpt = body[:DEFAULT_ENVELOPE_EXCERPT_LENGTH]

        try:
            envelope = json.loads(body)
        except json.JSONDecodeError as e:
            raise TransportParseError(
                f"Failed to parse Ollama response ({e}). Response was: {excerpt}",
                excerpt,
                status_code,
            ) from e

        if not isinstance(envelope, dict):
            raise TransportParseError(
                f"Ollama response is not a JSON object. Response was: {excerpt}",
                excerpt,
                status_code,
            )

        inner = envelope.get("response")
        if not isinstance(inner, str):
            if "error" in envelope:
                reason = f"Ollama reported an error: {envelope['error']}"
            else:
                reason = "Ollama response has no 'response' text field"
            if status_code is not None:
                reason = f"{reason} (HTTP {status_code})"
            raise TransportParseError(f"{reason}. Response was: {excerpt}", excerpt, status_code)

        return inner
