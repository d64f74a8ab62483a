"""FunTranslations Provider.

Rewrites a description in the voice of Yoda or Shakespeare. The translator is
chosen from the pokemon's habitat and legendary flag. A failed translation is
reported as an error; callers decide whether to fall back.
"""

import httpx
from pydantic import ValidationError

from ..core.constants import (
    ErrorMessages,
    TranslationApi,
    Upstream,
    UpstreamOutcome,
)
from ..core.exceptions import ExternalApiError, PokedexError, UpstreamTimeoutError
from ..core.logging import get_logger
from ..domain.translation import select_translation_style
from ..schemas.pokemon import TranslationRequest, TranslationResponse
from .base import UpstreamProvider

logger = get_logger(__name__)


class TranslationClient(UpstreamProvider):
    """Client for the FunTranslations translator endpoints."""

    def __init__(self, client: httpx.AsyncClient):
        super().__init__(provider_name=Upstream.TRANSLATION, client=client)

    async def translate(self, text: str, habitat: str | None, is_legendary: bool) -> str:
        """Translate text with the translator suited to the pokemon.

        Makes a single attempt with the selected translator and never
        switches to the other one.

        Args:
            text: Text to translate
            habitat: Pokemon habitat, if known
            is_legendary: Whether the pokemon is legendary

        Returns:
            Translated text

        Raises:
            UpstreamTimeoutError: The call timed out
            ExternalApiError: Non-2xx status, transport or payload failure
        """
        translator = select_translation_style(habitat, is_legendary)
        logger.debug(
            "Translating description",
            extra={'translator': translator.value, 'text_length': len(text)}
        )

        response = await self._request(
            "POST",
            TranslationApi.TRANSLATE_PATH.format(translator=translator.value),
            json=TranslationRequest(text=text).model_dump()
        )

        if not response.is_success:
            self._record_outcome(UpstreamOutcome.HTTP_ERROR)
            logger.warning(
                "Translation API returned an error status",
                extra={'translator': translator.value, 'status_code': response.status_code}
            )
            raise ExternalApiError(
                ErrorMessages.TRANSLATION_STATUS.format(status=response.status_code),
                upstream_status=response.status_code
            )

        try:
            translation = TranslationResponse.model_validate_json(response.content)
        except ValidationError as e:
            self._record_outcome(UpstreamOutcome.INVALID_RESPONSE)
            raise ExternalApiError(ErrorMessages.TRANSLATION_PARSE.format(error=e)) from e

        self._record_outcome(UpstreamOutcome.SUCCESS)
        return translation.contents.translated

    async def health_check(self) -> None:
        """Verify FunTranslations answers requests.

        Any HTTP answer counts, including rate-limit responses.

        Raises:
            ExternalApiError: If FunTranslations could not be reached
        """
        await self._probe(
            "POST",
            TranslationApi.TRANSLATE_PATH.format(translator=TranslationApi.HEALTH_CHECK_TRANSLATOR),
            json=TranslationRequest(text=TranslationApi.HEALTH_CHECK_TEXT).model_dump()
        )

    def _transport_error(self, error: httpx.HTTPError) -> PokedexError:
        if isinstance(error, httpx.TimeoutException):
            return UpstreamTimeoutError(ErrorMessages.TRANSLATION_TIMEOUT.format(error=error))
        return ExternalApiError(ErrorMessages.TRANSLATION_FAILED.format(error=error))
