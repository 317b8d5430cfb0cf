"""
Registry for player variants.

Maps variant keys ('search', 'random') to player classes. To add a new
variant, create a module with a Player subclass, import it here, and add an
entry to PLAYER_VARIANT_LOADERS.
"""

from typing import Callable, Dict, Optional, Type

from .base import Player


# Lazy imports keep the registry cheap to import
def _get_search_player() -> Type[Player]:
    from .search_player import SearchPlayer
    return SearchPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


DEFAULT_VARIANT = "search"

# Registry: maps variant key -> callable that returns the player class
PLAYER_VARIANT_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "search": _get_search_player,
    "random": _get_random_player,
}

# Canonical list of available variant keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of 'search' or 'random'. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip().lower()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key]()


def list_variants() -> list:
    """
    Return metadata about all available player variants.

    Returns:
        List of dicts with 'key' and 'description' for each variant.
    """
    return [
        {"key": "search", "description": "Bounded lookahead that scores leaves by food under the head"},
        {"key": "random", "description": "Random choice among moves the legality filter allows"},
    ]
