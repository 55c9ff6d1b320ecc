from fastapi import Depends, Request

from pokedex.clients import PokeAPIClient
from pokedex.clients import TranslationClient
from pokedex.config import Settings
from pokedex.services import PokemonService

# Settings and clients live on app.state: settings from create_app(), clients from the lifespan


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_poke_client(request: Request) -> PokeAPIClient:
    return request.app.state.poke_client

def get_translation_client(request: Request) -> TranslationClient:
    return request.app.state.translation_client

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    translation_client: TranslationClient = Depends(get_translation_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client, translation_client=translation_client)
