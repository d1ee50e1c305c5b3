import json
import logging
from typing import Any, Optional, Type, Union

from google.genai import types
from google.genai.client import Client
from pydantic import BaseModel, ValidationError

from app.core.config import Settings
from app.core.errors import ConfigurationError, ResponseParseError, TransportError
from app.core.genai_client import get_raw_google_client
from app.models.advisory import InlineMedia
from app.services.media import decode_media

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

MISSING_API_KEY_MESSAGE = (
    "La clave de API no está configurada. Por favor, contacte al soporte técnico."
)
MODEL_ERROR_PREFIX = "Error al contactar el modelo de IA o procesar su respuesta"
UNKNOWN_ERROR_MESSAGE = "Ocurrió un error desconocido al contactar el modelo de IA."

JSON_FENCE_OPEN = "```json"
JSON_FENCE_CLOSE = "```"

ResponseSchema = Union[Type[BaseModel], dict]


def strip_json_fence(text: str) -> str:
    """Removes a surrounding ```json fence, if present. Safe to apply repeatedly."""
    cleaned = text.strip()
    if cleaned.startswith(JSON_FENCE_OPEN):
        cleaned = cleaned[len(JSON_FENCE_OPEN) :]
        if cleaned.endswith(JSON_FENCE_CLOSE):
            cleaned = cleaned[: -len(JSON_FENCE_CLOSE)]
        cleaned = cleaned.strip()
    return cleaned


def _model_error_message(detail: str) -> str:
    if not detail:
        return UNKNOWN_ERROR_MESSAGE
    return f"{MODEL_ERROR_PREFIX}: {detail}"


def parse_structured_text(text: Optional[str], response_schema: ResponseSchema) -> Any:
    if not text or not text.strip():
        raise ResponseParseError(_model_error_message("la respuesta del modelo está vacía."))

    try:
        value = json.loads(strip_json_fence(text))
    except json.JSONDecodeError as exc:
        logger.error("Gemini returned text that is not valid JSON: %.200s", text)
        raise ResponseParseError(_model_error_message(str(exc))) from exc

    if isinstance(response_schema, type) and issubclass(response_schema, BaseModel):
        try:
            return response_schema.model_validate(value)
        except ValidationError as exc:
            logger.error(
                "Gemini response does not match %s: %s", response_schema.__name__, exc
            )
            raise ResponseParseError(
                _model_error_message(
                    f"la respuesta no cumple el esquema {response_schema.__name__}."
                )
            ) from exc
    return value


class GeminiGateway:
    """
    Single chokepoint for every structured query sent to Gemini.

    One attempt per call: no retries, no timeout override and no partial results.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Optional[Client] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> Client:
        if self._client is None:
            self._client = get_raw_google_client(self.api_key)
        return self._client

    @staticmethod
    def build_contents(prompt: str, media: Optional[InlineMedia] = None):
        if media is None:
            return prompt
        return [
            types.Part.from_bytes(data=decode_media(media), mime_type=media.mime_type),
            prompt,
        ]

    async def query(
        self,
        prompt: str,
        response_schema: ResponseSchema,
        media: Optional[InlineMedia] = None,
    ) -> Any:
        if not self.is_configured:
            logger.error("Gemini query rejected: API key is not configured")
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)

        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=response_schema,
        )
        try:
            response = await self._get_client().aio.models.generate_content(
                model=self.model,
                contents=self.build_contents(prompt, media),
                config=config,
            )
        except Exception as exc:
            logger.exception("Error calling Gemini model %s", self.model)
            raise TransportError(_model_error_message(str(exc))) from exc

        return parse_structured_text(response.text, response_schema)


def build_gateway(settings: Settings) -> GeminiGateway:
    if not settings.GEMINI_API_KEY:
        logger.error("GEMINI_API_KEY environment variable not set. Please set it.")
    return GeminiGateway(api_key=settings.GEMINI_API_KEY, model=settings.GEMINI_MODEL)
