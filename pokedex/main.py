import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Awaitable, TypeVar

import httpx
import uvicorn
from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from pokedex import __version__
from pokedex.clients import PokeAPIClient, TranslationClient
from pokedex.config import Settings, get_settings
from pokedex.dependencies import get_app_settings, get_poke_client, get_pokemon_service
from pokedex.errors import RequestTimeoutError, UpstreamUnavailableError
from pokedex.models import PokemonResponse, TranslatedPokemonResponse
from pokedex.services import PokemonService

logger = logging.getLogger(__name__)

SERVICE_NAME = "pokedex-api"
USER_AGENT = f"{SERVICE_NAME}/{__version__}"

T = TypeVar("T")


def configure_logging(level_name: str) -> None:
    """Ensure application logs propagate with the requested verbosity."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        )
    root_logger.setLevel(level)


async def run_with_request_timeout(operation: Awaitable[T], timeout: float) -> T:
    """Bounds a whole request. On expiry the in-flight upstream call is cancelled."""
    try:
        return await asyncio.wait_for(operation, timeout=timeout)
    except asyncio.TimeoutError:
        logger.error(f"Request exceeded the {timeout:g}s request timeout")
        raise RequestTimeoutError(timeout)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One connection pool per process, shared read-only by both clients
        async with httpx.AsyncClient(headers={"User-Agent": USER_AGENT}) as http_client:
            app.state.poke_client = PokeAPIClient(
                http_client,
                base_url=settings.pokeapi_base_url,
                timeout=settings.http_timeout,
            )
            app.state.translation_client = TranslationClient(
                http_client,
                base_url=settings.translation_api_base_url,
                timeout=settings.http_timeout,
            )
            logger.info(f"Starting {SERVICE_NAME} {__version__}")
            yield
        logger.info("Shutdown complete, HTTP client closed")

    app = FastAPI(
        title="Pokedex API",
        description="Pokemon species information with fun translations of their descriptions.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        """Liveness: the process is up and serving requests."""
        return {"status": "healthy", "service": SERVICE_NAME}

    @app.get("/ready", tags=["health"])
    async def readiness_check(poke_client: PokeAPIClient = Depends(get_poke_client)):
        """Readiness: PokeAPI is reachable. The translation API is optional and not probed."""
        try:
            await poke_client.ping()
        except UpstreamUnavailableError as e:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unavailable", "detail": e.detail},
            )
        return {"status": "ready"}

    # Endpoint 1: Basic Pokemon Info
    @app.get(
        "/pokemon/{name}",
        response_model=PokemonResponse,
        summary="Returns basic Pokemon information",
    )
    async def get_pokemon_info(
        name: str,
        service: PokemonService = Depends(get_pokemon_service),
        app_settings: Settings = Depends(get_app_settings),
    ):
        """Fetches basic information (name, description, habitat, legendary status) for a given Pokemon name."""
        logger.info(f"Fetching pokemon: {name}")
        # PokemonNotFoundError (404) and UpstreamUnavailableError (502) are HTTPExceptions and rendered by FastAPI
        return await run_with_request_timeout(service.get_basic_info(name), app_settings.request_timeout)

    # Endpoint 2: Translated Pokemon Info
    @app.get("/pokemon/translated/{name}", response_model=TranslatedPokemonResponse, include_in_schema=False)
    @app.get(
        "/pokemon/{name}/translated",
        response_model=TranslatedPokemonResponse,
        summary="Returns Pokemon information with fun translation based on legendary/habitat status",
    )
    async def get_translated_pokemon_info(
        name: str,
        service: PokemonService = Depends(get_pokemon_service),
        app_settings: Settings = Depends(get_app_settings),
    ):
        """Applies the translation rule (Yoda for legendary/cave, Shakespeare otherwise).

        Translation failures are never surfaced: the untranslated description is returned instead.
        """
        logger.info(f"Fetching translated pokemon: {name}")
        result = await run_with_request_timeout(service.get_translated_info(name), app_settings.request_timeout)
        logger.info(
            f"Served '{result.name}' with {result.translation_style.value} style "
            f"({'translated' if result.translated else 'untranslated fallback'})"
        )
        return result

    return app


app = create_app()


def run() -> None:
    """Entrypoint for the `pokedex-api` script."""
    settings = get_settings()
    uvicorn.run(
        "pokedex.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
