"""Utility functions organized by domain.

Prefer importing from specific modules for better clarity:
    from pokedex.utils.strings import normalize_text
    from pokedex.utils.generators import generate_request_id
"""

from .generators import generate_request_id
from .strings import normalize_text

__all__ = [
    "generate_request_id",
    "normalize_text",
]
