"""Ollama availability checks.

Used by the CLI to tell the user whether model-backed parsing can work
before they enable it. The intent parser itself never probes the server.

Classes:
    OllamaHealthCheck: Server and model availability probe
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class OllamaHealthCheck:
    """Check whether an Ollama server is up and has a given model.

    All probes go to ``/api/tags`` and never raise; failures read as "not
    available".

    Attributes:
        base_url: Ollama server URL without a trailing slash.
        timeout: Request timeout in seconds.

    Example:
        >>> health = OllamaHealthCheck()
        >>> await health.has_model("llama3.2")
        True
    """

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        timeout: float = 5.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _fetch_tags(self) -> dict[str, Any] | None:
        """GET /api/tags; None when the server cannot be reached or errors."""
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}/api/tags",
                    timeout=self.timeout,
                )
        except httpx.TimeoutException:
            logger.debug(f"Timeout connecting to Ollama at {self.base_url}")
            return None
        except httpx.RequestError as e:
            logger.debug(f"Could not reach Ollama at {self.base_url}: {e}")
            return None

        if response.status_code != 200:
            logger.debug(f"Ollama returned status {response.status_code}")
            return None

        try:
            data = response.json()
        except ValueError as e:
            logger.debug(f"Ollama returned invalid JSON: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    async def is_available(self) -> bool:
        """True if the server answers /api/tags with 200."""
        return await self._fetch_tags() is not None

    async def get_available_models(self) -> list[str]:
        """Names of installed models; empty if the server is unavailable."""
        data = await self._fetch_tags()
        if not data:
            return []
        models = data.get("models") or []
        return [m["name"] for m in models if isinstance(m, dict) and m.get("name")]

    async def has_model(self, model_name: str) -> bool:
        """True if ``model_name`` is installed.

        A bare name also matches tagged variants, so "llama3.2" matches
        "llama3.2:latest".
        """
        for name in await self.get_available_models():
            if name == model_name or name.startswith(f"{model_name}:"):
                return True
        logger.debug(f"Model '{model_name}' not found on {self.base_url}")
        return False


def check_ollama_sync(
    base_url: str = "http://localhost:11434",
    model_name: str | None = None,
) -> tuple[bool, str]:
    """Synchronous availability check for CLI use.

    Args:
        base_url: Ollama server URL.
        model_name: Optional model that must be installed.

    Returns:
        Tuple of (ready, message).
    """

    async def _check() -> tuple[bool, str]:
        health = OllamaHealthCheck(base_url=base_url)

        if not await health.is_available():
            return False, f"Ollama server not available at {base_url}"

        if model_name and not await health.has_model(model_name):
            models = await health.get_available_models()
            hint = f"Run: ollama pull {model_name}"
            if models:
                return False, (
                    f"Model '{model_name}' not found. "
                    f"Available models: {', '.join(models)}. {hint}"
                )
            return False, f"Model '{model_name}' not found. {hint}"

        return True, "Ollama ready"

    return asyncio.run(_check())
