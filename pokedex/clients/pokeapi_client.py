import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pokedex.errors import PokemonNotFoundError, UpstreamUnavailableError
from pokedex.models import PokeAPISpecies, PokemonSpeciesData

logger = logging.getLogger(__name__)


def clean_description(text: str) -> str:
    """Collapse the newlines, form feeds and repeated spaces PokeAPI leaves in flavor text."""
    return " ".join(text.split())


class PokeAPIClient:
    DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"
    DESCRIPTION_LANGUAGE = "en"

    def __init__(self, http_client: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL, timeout: float = 10.0):
        # The HTTP client is shared with other clients and owned by the app lifespan
        self.client = http_client
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _fetch_species_data(self, pokemon_name: str) -> dict:
        """Internal method to fetch the raw species payload with error handling."""
        url = f"{self.base_url}/pokemon-species/{quote(pokemon_name.lower(), safe='')}"
        logger.debug(f"Fetching Pokemon species from: {url}")

        try:
            response = await self.client.get(url, timeout=self.timeout)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise PokemonNotFoundError(pokemon_name)
            detail = f"PokeAPI failed with status {e.response.status_code}"
            logger.error(detail)
            raise UpstreamUnavailableError(detail)
        except httpx.TimeoutException as e:
            logger.error(f"PokeAPI request timed out: {e!r}")
            raise UpstreamUnavailableError(f"PokeAPI request timed out: {e!r}")
        except httpx.RequestError as e:
            logger.error(f"PokeAPI network error: {e!r}")
            raise UpstreamUnavailableError(f"PokeAPI network error: {e!r}")
        except ValueError:
            # response.json() on a body that is not JSON
            logger.error("PokeAPI returned a body that is not valid JSON.")
            raise UpstreamUnavailableError("PokeAPI returned an unexpected response format.")

    async def get_pokemon_species(self, name: str) -> PokemonSpeciesData:
        """Fetches, processes, and validates the core Pokemon species data."""
        data = await self._fetch_species_data(name)

        try:
            species = PokeAPISpecies.model_validate(data)
        except ValidationError as e:
            logger.error(f"PokeAPI payload for '{name}' failed validation: {e.error_count()} error(s)")
            raise UpstreamUnavailableError("PokeAPI returned an unexpected response format.")

        # First English entry wins
        description = next(
            (
                clean_description(entry.flavor_text)
                for entry in species.flavor_text_entries
                if entry.language.name == self.DESCRIPTION_LANGUAGE
            ),
            None,
        )
        if description is None:
            logger.error(f"PokeAPI has no English description for '{species.name}'")
            raise UpstreamUnavailableError("no description")

        try:
            return PokemonSpeciesData(
                name=species.name,
                description=description,
                habitat=species.habitat.name if species.habitat else None,
                is_legendary=species.is_legendary,
            )
        except ValidationError:
            raise UpstreamUnavailableError("PokeAPI returned a species without a name.")

    async def ping(self) -> None:
        """Readiness probe: checks that PokeAPI answers a known species lookup."""
        try:
            response = await self.client.get(f"{self.base_url}/pokemon-species/1", timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"PokeAPI readiness check failed: {e!r}")
            raise UpstreamUnavailableError(f"PokeAPI readiness check failed: {e!r}")
