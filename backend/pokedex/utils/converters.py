"""Path conversion utilities."""

import re

from ..core.constants import ApiEndpoints, PathNormalization


def normalize_path(path: str) -> str:
    """Normalize API path by replacing pokemon names with a placeholder.

    Useful for metrics and logging to avoid high cardinality.

    Args:
        path: API path to normalize

    Returns:
        Normalized path with pokemon names replaced

    Examples:
        >>> normalize_path("/pokemon/pikachu")
        "/pokemon/{name}"
        >>> normalize_path("/pokemon/translated/mewtwo")
        "/pokemon/translated/{name}"
    """
    if not path:
        return path

    prefix = re.escape(ApiEndpoints.POKEMON)
    translated = re.sub(
        rf'^{prefix}/translated/[^/]+$',
        f'{ApiEndpoints.POKEMON}/translated/{PathNormalization.NAME_PLACEHOLDER}',
        path
    )
    if translated != path:
        return translated

    return re.sub(
        rf'^{prefix}/[^/]+$',
        f'{ApiEndpoints.POKEMON}/{PathNormalization.NAME_PLACEHOLDER}',
        path
    )
