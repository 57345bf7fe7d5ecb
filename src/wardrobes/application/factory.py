"""Service factory for dependency injection.

Builds the pipeline and its collaborators from PipelineSettings. Whether a
language model is used is decided here, from settings, and handed to the
parser as an explicit constructor argument.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from wardrobes.application.config.schema import PipelineSettings

if TYPE_CHECKING:
    from wardrobes.application.commands import ProcessCommand
    from wardrobes.application.pipeline import IntentPipeline
    from wardrobes.contracts.protocols import (
        IntentParserProtocol,
        LayoutRepositoryProtocol,
        TextGenerationBackend,
    )
    from wardrobes.domain.services import IntentValidator, LayoutEngine

logger = logging.getLogger(__name__)


@dataclass
class ServiceFactory:
    """Factory for creating pipeline services.

    Attributes:
        settings: Settings the services are configured from.
        backend: Text-generation backend override. When None, one is created
            from ``settings.llm`` if model-backed parsing is enabled.
        repository: Repository handed to ProcessCommand.

    Example:
        ```python
        factory = ServiceFactory(settings=load_settings(path))
        outcome = await factory.create_pipeline().run("add a door", state)
        ```
    """

    settings: PipelineSettings = field(default_factory=PipelineSettings)
    backend: "TextGenerationBackend | None" = None
    repository: "LayoutRepositoryProtocol | None" = None

    def get_backend(self) -> "TextGenerationBackend | None":
        """The configured backend, or None when model parsing is disabled."""
        if self.backend is not None:
            return self.backend
        llm = self.settings.llm
        if not llm.enabled:
            return None

        from wardrobes.infrastructure.llm import OllamaTextBackend

        logger.debug(f"Using Ollama model {llm.model} at {llm.ollama_url}")
        self.backend = OllamaTextBackend(
            model=llm.model,
            ollama_url=llm.ollama_url,
            temperature=llm.temperature,
            max_tokens=llm.max_tokens,
        )
        return self.backend

    def create_parser(self) -> "IntentParserProtocol":
        from wardrobes.infrastructure.llm import LLMIntentParser

        return LLMIntentParser(
            backend=self.get_backend(),
            timeout=self.settings.llm.timeout,
            clarification_threshold=self.settings.clarification_threshold,
        )

    def create_validator(self) -> "IntentValidator":
        from wardrobes.domain.services import IntentValidator

        return IntentValidator(
            min_confidence=self.settings.min_confidence,
            max_count=self.settings.max_count,
        )

    def create_engine(self) -> "LayoutEngine":
        from wardrobes.domain.services import LayoutEngine

        return LayoutEngine()

    def create_pipeline(self) -> "IntentPipeline":
        from wardrobes.application.pipeline import IntentPipeline

        return IntentPipeline(
            parser=self.create_parser(),
            validator=self.create_validator(),
            engine=self.create_engine(),
            clarification_threshold=self.settings.clarification_threshold,
        )

    def create_process_command(self) -> "ProcessCommand":
        from wardrobes.application.commands import ProcessCommand

        return ProcessCommand(
            pipeline=self.create_pipeline(),
            repository=self.repository,
        )
