"""Model-backed intent parser with deterministic fallback.

Classes:
    LLMIntentParser: Asks a text-generation backend for an intent and falls
        back to the keyword parser on any failure
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace

from pydantic import ValidationError

from wardrobes.contracts.protocols import TextGenerationBackend
from wardrobes.domain.entities import Intent
from wardrobes.domain.services.keyword_parser import KeywordIntentParser
from wardrobes.domain.value_objects import CLARIFICATION_THRESHOLD
from wardrobes.infrastructure.llm.models import parse_intent_reply
from wardrobes.infrastructure.llm.prompts import (
    INTENT_SYSTEM_PROMPT,
    LOW_CONFIDENCE_CLARIFICATION,
)

logger = logging.getLogger(__name__)


class LLMIntentParser:
    """Intent parser that prefers a language model when one is configured.

    Falls back to the keyword parser, silently for the caller, when:
    - no backend is configured
    - the backend raises or times out
    - the reply is not a JSON object matching the intent schema

    The backend is called at most once per command; there is no retry.

    Attributes:
        backend: Optional text-generation backend.
        fallback: Deterministic parser used whenever the backend cannot be.
        timeout: Seconds to wait for the backend.
        clarification_threshold: Below this confidence a clarification is
            synthesized if the model did not provide one.

    Example:
        >>> parser = LLMIntentParser(backend=None)
        >>> intent = await parser.parse("add a shelf")
        >>> intent.action
        <IntentAction.ADD_SHELF: 'add_shelf'>
    """

    def __init__(
        self,
        backend: TextGenerationBackend | None = None,
        fallback: KeywordIntentParser | None = None,
        timeout: float = 10.0,
        clarification_threshold: float = CLARIFICATION_THRESHOLD,
    ) -> None:
        self.backend = backend
        self.fallback = fallback or KeywordIntentParser()
        self.timeout = timeout
        self.clarification_threshold = clarification_threshold

    async def parse(self, command: str) -> Intent:
        """Parse a command, never raising.

        Args:
            command: The user's command text.

        Returns:
            The model's intent when usable, otherwise the keyword parser's.
        """
        if self.backend is None:
            logger.debug("No text-generation backend configured, using keyword parser")
            return self.fallback.parse(command)

        try:
            reply = await asyncio.wait_for(
                self.backend.complete(INTENT_SYSTEM_PROMPT, command),
                timeout=self.timeout,
            )
            if not reply:
                raise ValueError("Empty reply from model")
            intent = parse_intent_reply(reply)

        except asyncio.TimeoutError:
            logger.warning(f"Intent model timed out after {self.timeout}s, using keyword parser")
            return self.fallback.parse(command)

        except ValidationError as e:
            logger.warning(
                f"Intent model reply failed validation ({e.error_count()} errors), "
                "using keyword parser"
            )
            return self.fallback.parse(command)

        except ValueError as e:
            logger.warning(f"Unusable intent model reply: {e}, using keyword parser")
            return self.fallback.parse(command)

        except Exception as e:
            logger.warning(
                f"Intent model call failed ({type(e).__name__}: {e}), using keyword parser"
            )
            return self.fallback.parse(command)

        if intent.confidence < self.clarification_threshold and not intent.clarification:
            intent = replace(intent, clarification=LOW_CONFIDENCE_CLARIFICATION)

        logger.debug(f"Model parsed {command!r} as {intent.action.value} ({intent.confidence})")
        return intent

    def parse_sync(self, command: str) -> Intent:
        """Synchronous wrapper for parse()."""
        return asyncio.run(self.parse(command))
