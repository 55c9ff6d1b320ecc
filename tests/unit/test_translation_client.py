import json

import pytest
import pytest_asyncio
import httpx
from pokedex.clients.translation_client import TranslationClient
from pokedex.errors import TranslationUnavailableError
from pokedex.models import TranslationStyle


MOCK_TRANSLATION_SUCCESS = {
    "success": {"total": 1},
    "contents": {
        "translated": "Yoda speaks, you listen.",
        "text": "You listen to Yoda speak.",
        "translation": "yoda"
    }
}

@pytest_asyncio.fixture
async def translation_client():
    """Provides a TranslationClient backed by a real (mocked transport) httpx client."""
    async with httpx.AsyncClient() as http_client:
        yield TranslationClient(http_client, base_url="https://api.funtranslations.com/translate", timeout=2.0)


def test_each_style_has_its_own_endpoint():
    translation_client = TranslationClient(httpx.AsyncClient(), base_url="https://api.funtranslations.com/translate/")
    assert translation_client.endpoint_for(TranslationStyle.YODA) == "https://api.funtranslations.com/translate/yoda.json"
    assert translation_client.endpoint_for(TranslationStyle.SHAKESPEARE) == "https://api.funtranslations.com/translate/shakespeare.json"

@pytest.mark.asyncio
async def test_successful_yoda_translation(httpx_mock, translation_client):
    """Verifies successful API call and correct extraction of the translated text."""
    # ARRANGE: Mock the external API call
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/yoda.json",
        method="POST",
        json=MOCK_TRANSLATION_SUCCESS,
        status_code=200
    )

    # ACT
    result = await translation_client.translate("You listen to Yoda speak.", TranslationStyle.YODA)

    # ASSERT: Check that only the translated text is returned
    assert result == "Yoda speaks, you listen."

    # The text is sent as a JSON body
    request = httpx_mock.get_request()
    assert json.loads(request.content) == {"text": "You listen to Yoda speak."}


@pytest.mark.asyncio
async def test_api_rate_limit_raises_translation_unavailable(httpx_mock, translation_client):
    """Tests that a 429 (Rate Limit) from the external API is mapped to TranslationUnavailableError."""
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/shakespeare.json",
        status_code=429,
        json={"error": {"code": 429, "message": "Too Many Requests"}}
    )

    with pytest.raises(TranslationUnavailableError) as excinfo:
        await translation_client.translate("To be or not to be.", TranslationStyle.SHAKESPEARE)

    assert excinfo.value.status_code == 503
    assert "rate limit" in excinfo.value.detail.lower()


@pytest.mark.asyncio
async def test_api_server_error_raises_translation_unavailable(httpx_mock, translation_client):
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/yoda.json",
        status_code=500,
    )

    with pytest.raises(TranslationUnavailableError) as excinfo:
        await translation_client.translate("Test.", TranslationStyle.YODA)

    assert "500" in excinfo.value.detail


@pytest.mark.asyncio
async def test_api_network_error_raises_translation_unavailable(httpx_mock, translation_client):
    """Tests that a network failure (DNS error, refused connection) raises TranslationUnavailableError."""
    httpx_mock.add_exception(
        httpx.ConnectError("Connection refused."),
        url="https://api.funtranslations.com/translate/yoda.json"
    )

    with pytest.raises(TranslationUnavailableError) as excinfo:
        await translation_client.translate("Test.", TranslationStyle.YODA)

    assert "network error" in excinfo.value.detail.lower()


@pytest.mark.asyncio
async def test_api_timeout_raises_translation_unavailable(httpx_mock, translation_client):
    httpx_mock.add_exception(
        httpx.ReadTimeout("Read timed out."),
        url="https://api.funtranslations.com/translate/yoda.json"
    )

    with pytest.raises(TranslationUnavailableError) as excinfo:
        await translation_client.translate("Test.", TranslationStyle.YODA)

    assert "timed out" in excinfo.value.detail


@pytest.mark.asyncio
async def test_unexpected_payload_raises_translation_unavailable(httpx_mock, translation_client):
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/yoda.json",
        json={"success": {"total": 1}},
    )

    with pytest.raises(TranslationUnavailableError) as excinfo:
        await translation_client.translate("Test.", TranslationStyle.YODA)

    assert "unexpected response format" in excinfo.value.detail


@pytest.mark.asyncio
async def test_empty_translation_raises_translation_unavailable(httpx_mock, translation_client):
    """An empty translated field is treated the same as a failed call."""
    httpx_mock.add_response(
        url="https://api.funtranslations.com/translate/shakespeare.json",
        json={"success": {"total": 1}, "contents": {"translated": "  ", "text": "Test.", "translation": "shakespeare"}},
    )

    with pytest.raises(TranslationUnavailableError) as excinfo:
        await translation_client.translate("Test.", TranslationStyle.SHAKESPEARE)

    assert "empty" in excinfo.value.detail
