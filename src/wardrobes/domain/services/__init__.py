"""Domain services: parsing, validation and layout of wardrobe commands."""

from .intent_validator import IntentValidation, IntentValidator
from .keyword_parser import KeywordIntentParser
from .layout_engine import LayoutEngine, uuid_id_factory
from .spacing import column_offsets, door_offsets, shelf_bounds, shelf_offsets

__all__ = [
    "IntentValidation",
    "IntentValidator",
    "KeywordIntentParser",
    "LayoutEngine",
    "column_offsets",
    "door_offsets",
    "shelf_bounds",
    "shelf_offsets",
    "uuid_id_factory",
]
