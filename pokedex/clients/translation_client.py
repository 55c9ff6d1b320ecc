import logging

import httpx
from pydantic import ValidationError

from pokedex.errors import TranslationUnavailableError
from pokedex.models import FunTranslationsResponse, TranslationStyle

logger = logging.getLogger(__name__)


class TranslationClient:
    DEFAULT_BASE_URL = "https://api.funtranslations.com/translate"

    def __init__(self, http_client: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL, timeout: float = 10.0):
        self.client = http_client
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def endpoint_for(self, style: TranslationStyle) -> str:
        return f"{self.base_url}/{style.value}.json"

    async def translate(self, text: str, style: TranslationStyle) -> str:
        """Performs the network call and maps every failure to TranslationUnavailableError.

        Failures here are expected (the public API is heavily rate limited), so
        they are logged as warnings and left to the caller to recover from.
        """
        url = self.endpoint_for(style)
        logger.debug(f"Translating {len(text)} characters with the {style.value} translator")

        try:
            response = await self.client.post(url, json={"text": text}, timeout=self.timeout)
            response.raise_for_status()
            payload = FunTranslationsResponse.model_validate(response.json())

        except httpx.HTTPStatusError as e:
            detail = f"Translation API failed with status {e.response.status_code}. "
            if e.response.status_code == 429:
                detail += "Rate limit exceeded."
            logger.warning(f"Translation API error: {detail}")
            raise TranslationUnavailableError(detail)

        except httpx.TimeoutException as e:
            logger.warning(f"Translation API timed out: {e!r}")
            raise TranslationUnavailableError(f"Translation API timed out: {e!r}")

        except httpx.RequestError as e:
            logger.warning(f"Translation API network error: {e!r}")
            raise TranslationUnavailableError(f"Translation API network error: {e!r}")

        except (ValueError, ValidationError):
            logger.warning("Translation API response parsing error.")
            raise TranslationUnavailableError("Translation API returned an unexpected response format.")

        translated = payload.contents.translated.strip()
        if not translated:
            logger.warning(f"Translation API returned an empty {style.value} translation.")
            raise TranslationUnavailableError("Translation API returned an empty translation.")
        return translated
