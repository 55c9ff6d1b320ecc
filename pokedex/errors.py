from fastapi import HTTPException, status


class PokemonNotFoundError(HTTPException):
    def __init__(self, name: str):
        self.name = name
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"Pokemon '{name}' not found.")

# Base class for failures of an external API (network, status or payload)
class APIClientError(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=f"External API Error: {detail}")

class UpstreamUnavailableError(APIClientError):
    """The species provider is unreachable, timed out or sent unusable data."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)

class TranslationUnavailableError(APIClientError):
    """The translation provider failed. Recovered by PokemonService, never returned to API consumers."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)

class RequestTimeoutError(HTTPException):
    def __init__(self, timeout: float):
        super().__init__(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=f"Request did not complete within {timeout:g} seconds.",
        )
