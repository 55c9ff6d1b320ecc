import logging

from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.clients.translation_client import TranslationClient
from pokedex.errors import TranslationUnavailableError
from pokedex.models import PokemonResponse, TranslatedPokemonResponse
from pokedex.services.translation_rules import select_translation_style

logger = logging.getLogger(__name__)


class PokemonService:
    # Service requires both clients via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient, translation_client: TranslationClient):
        self._poke_client = poke_client
        self._translation_client = translation_client

    async def get_basic_info(self, name: str) -> PokemonResponse:
        """
        Endpoint 1: Fetches basic Pokemon data and maps to the response model.
        PokemonNotFoundError and UpstreamUnavailableError propagate unchanged.
        """
        species_data = await self._poke_client.get_pokemon_species(name)
        return PokemonResponse.from_species(species_data)

    async def get_translated_info(self, name: str) -> TranslatedPokemonResponse:
        """
        Endpoint 2: Fetches data and applies the translation rule.

        The species lookup is the only step that can fail. Translation is best
        effort: when it is unavailable the original description is returned.
        """
        species_data = await self._poke_client.get_pokemon_species(name)

        translation_style = select_translation_style(species_data)

        try:
            translated_description = await self._translation_client.translate(
                species_data.description,
                translation_style,
            )
        except TranslationUnavailableError as e:
            logger.warning(
                f"Falling back to untranslated description for '{species_data.name}' "
                f"({translation_style.value}): {e.detail}"
            )
            return TranslatedPokemonResponse.from_species(
                species_data,
                translated=False,
                translation_style=translation_style,
            )

        return TranslatedPokemonResponse.from_species(
            species_data,
            description=translated_description,
            translated=True,
            translation_style=translation_style,
        )
