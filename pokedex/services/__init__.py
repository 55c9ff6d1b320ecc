"""Business logic composed on top of the API clients."""
from .pokemon_service import PokemonService
from .translation_rules import select_translation_style

__all__ = [
    'PokemonService',
    'select_translation_style',
]
