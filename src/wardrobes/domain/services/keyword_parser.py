"""Deterministic keyword parser for wardrobe commands.

This is the parser of record: it is always available, never raises, and
gives the same intent for the same text. The model-backed parser falls
back to it whenever its own answer cannot be used.

Categories are checked in a fixed priority order and the first match wins:
door add/remove, shelf add/remove, column add/remove, material, width,
height, depth.
"""

from __future__ import annotations

import logging
import re

from ..entities import Intent, IntentParameters
from ..value_objects import IntentAction, Material

logger = logging.getLogger(__name__)


COUNT_CONFIDENCE = 0.85
MATERIAL_CONFIDENCE = 0.9
DIMENSION_CONFIDENCE = 0.88

UNKNOWN_CLARIFICATION = (
    "I couldn't understand that command. Try: \"add a door\", \"remove door\", "
    "\"add 3 shelves\", \"add a column\", \"remove column\", "
    "\"make it 200cm wide\", \"change material to oak\""
)

_COUNT_PATTERN = re.compile(r"\d+", re.ASCII)
_MEASUREMENT_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(cm|m)", re.ASCII)

_ADD_WORDS = ("add",)
_REMOVE_WORDS = ("remove", "delete")

# (verbs, nouns, action) in priority order.
_COUNT_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...], IntentAction], ...] = (
    (_ADD_WORDS, ("door",), IntentAction.ADD_DOOR),
    (_REMOVE_WORDS, ("door",), IntentAction.REMOVE_DOOR),
    (_ADD_WORDS, ("shelf", "shelves"), IntentAction.ADD_SHELF),
    (_REMOVE_WORDS, ("shelf", "shelves"), IntentAction.REMOVE_SHELF),
    (_ADD_WORDS, ("column",), IntentAction.ADD_COLUMN),
    (_REMOVE_WORDS, ("column",), IntentAction.REMOVE_COLUMN),
)

_MATERIAL_WORDS = ("material", "wood")

# (keywords, parameter name) in priority order.
_DIMENSION_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("wide", "width"), "width"),
    (("tall", "height"), "height"),
    (("deep", "depth"), "depth"),
)


def _contains_any(text: str, words: tuple[str, ...]) -> bool:
    return any(word in text for word in words)


def _extract_count(text: str) -> int:
    match = _COUNT_PATTERN.search(text)
    return int(match.group(0)) if match else 1


def _extract_centimeters(text: str) -> float | None:
    """First measurement in the text, normalized to centimeters."""
    match = _MEASUREMENT_PATTERN.search(text)
    if match is None:
        return None
    value = float(match.group(1))
    if match.group(2) == "m":
        return value * 100
    return value


class KeywordIntentParser:
    """Keyword and regex based command parser.

    Example:
        >>> parser = KeywordIntentParser()
        >>> parser.parse("add 2 doors").parameters.count
        2
    """

    def parse(self, command: str) -> Intent:
        """Parse a free-text command into an intent.

        Args:
            command: The user's command text.

        Returns:
            The matched intent, or an ``unknown`` intent with confidence 0
            and a clarification listing example commands.
        """
        lower = command.lower()

        for verbs, nouns, action in _COUNT_RULES:
            if _contains_any(lower, verbs) and _contains_any(lower, nouns):
                return Intent(
                    action=action,
                    confidence=COUNT_CONFIDENCE,
                    parameters=IntentParameters(count=_extract_count(lower)),
                )

        if _contains_any(lower, _MATERIAL_WORDS):
            for material in Material.names():
                if material in lower:
                    return Intent(
                        action=IntentAction.CHANGE_MATERIAL,
                        confidence=MATERIAL_CONFIDENCE,
                        parameters=IntentParameters(material=material),
                    )

        for keywords, dimension in _DIMENSION_RULES:
            if not _contains_any(lower, keywords):
                continue
            value = _extract_centimeters(lower)
            if value is not None:
                return Intent(
                    action=IntentAction.SET_DIMENSIONS,
                    confidence=DIMENSION_CONFIDENCE,
                    parameters=IntentParameters(**{dimension: value}),
                )

        logger.debug(f"No keyword rule matched command: {command!r}")
        return Intent(
            action=IntentAction.UNKNOWN,
            confidence=0.0,
            parameters=IntentParameters(),
            clarification=UNKNOWN_CLARIFICATION,
        )
