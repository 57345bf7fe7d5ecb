"""pydantic-ai text-generation backend served by Ollama.

Ollama exposes an OpenAI-compatible API under ``/v1``, so the backend uses
pydantic-ai's OpenAIChatModel with a provider pointed at the Ollama server.
The agent returns plain text; turning that text into an intent is the
parser's job.

Example:
    >>> backend = OllamaTextBackend(model="llama3.2")
    >>> reply = await backend.complete(INTENT_SYSTEM_PROMPT, "add a door")
"""

from __future__ import annotations

import logging

from pydantic_ai import Agent
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

logger = logging.getLogger(__name__)


def create_ollama_model(model_name: str, ollama_url: str) -> OpenAIChatModel:
    """Create a chat model bound to an Ollama server.

    Args:
        model_name: Model name, with or without an "ollama:" prefix.
        ollama_url: Base URL of the Ollama server, with or without "/v1".

    Returns:
        OpenAIChatModel using Ollama's OpenAI-compatible endpoint.
    """
    if model_name.startswith("ollama:"):
        model_name = model_name[len("ollama:") :]

    base_url = ollama_url.rstrip("/")
    if not base_url.endswith("/v1"):
        base_url = f"{base_url}/v1"

    # Ollama ignores the key but the OpenAI client requires one.
    provider = OpenAIProvider(base_url=base_url, api_key="ollama")
    return OpenAIChatModel(model_name, provider=provider)


class OllamaTextBackend:
    """TextGenerationBackend implemented with a pydantic-ai agent.

    One agent is built per distinct set of system instructions and reused.

    Attributes:
        model: Ollama model name.
        ollama_url: Ollama server URL.
        temperature: Sampling temperature.
        max_tokens: Upper bound on reply length.
    """

    def __init__(
        self,
        model: str = "llama3.2",
        ollama_url: str = "http://localhost:11434",
        temperature: float = 0.3,
        max_tokens: int = 200,
    ) -> None:
        self.model = model
        self.ollama_url = ollama_url
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._chat_model = create_ollama_model(model, ollama_url)
        self._agents: dict[str, Agent[None, str]] = {}

    def _agent_for(self, system_instructions: str) -> Agent[None, str]:
        agent = self._agents.get(system_instructions)
        if agent is None:
            agent = Agent(
                self._chat_model,
                output_type=str,
                system_prompt=system_instructions,
                model_settings=ModelSettings(
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
            )
            self._agents[system_instructions] = agent
        return agent

    async def complete(self, system_instructions: str, user_text: str) -> str:
        """Run one completion.

        Raises:
            httpx.RequestError: On network errors reaching Ollama.
            pydantic_ai.exceptions.UnexpectedModelBehavior: On a bad model response.
        """
        agent = self._agent_for(system_instructions)
        logger.debug(f"Requesting completion from {self.model} at {self.ollama_url}")
        result = await agent.run(user_text)
        logger.debug(f"Model reply length: {len(result.output)} chars")
        return result.output
