"""Upstream API Providers.

This module provides the clients for the external APIs the service aggregates:
PokeAPI for species data and FunTranslations for description rewrites.
"""

from .base import UpstreamProvider
from .funtranslations import TranslationClient
from .http_client import build_async_client
from .pokeapi import PokeApiClient

__all__ = [
    "UpstreamProvider",
    "PokeApiClient",
    "TranslationClient",
    "build_async_client",
]
