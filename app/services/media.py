import base64
import binascii
import logging
import mimetypes
from typing import Optional, Union

from fastapi import UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.core.errors import MediaError
from app.models.advisory import InlineMedia

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"

READ_ERROR_MESSAGE = "No se pudo leer el archivo."
FORMAT_ERROR_MESSAGE = "No se pudo extraer los datos base64 del archivo."

MediaSource = Union[UploadFile, str, InlineMedia]


def _resolve_mime_type(mime_type: Optional[str], filename: Optional[str]) -> str:
    if mime_type:
        return mime_type
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed
    return DEFAULT_MIME_TYPE


def encode_bytes(
    data: bytes, mime_type: Optional[str] = None, filename: Optional[str] = None
) -> InlineMedia:
    if not data:
        raise MediaError(FORMAT_ERROR_MESSAGE)
    return InlineMedia(
        data=base64.b64encode(data).decode("ascii"),
        mime_type=_resolve_mime_type(mime_type, filename),
    )


async def encode_upload(upload: UploadFile) -> InlineMedia:
    """
    Reads an uploaded file in full and converts it into an inline media part.
    """
    try:
        data = await upload.read()
    except Exception as exc:
        logger.exception(
            "Failed to read uploaded file '%s'", getattr(upload, "filename", None)
        )
        raise MediaError(READ_ERROR_MESSAGE) from exc
    return encode_bytes(data, mime_type=upload.content_type, filename=upload.filename)


def encode_data_url(data_url: str) -> InlineMedia:
    """
    Converts a browser data URL ('data:<mime>;base64,<payload>') into an inline media part.
    """
    header, _, payload = data_url.strip().partition(",")
    if not payload:
        raise MediaError(FORMAT_ERROR_MESSAGE)

    mime_type = None
    if header.startswith("data:"):
        mime_type = header[len("data:") :].split(";", 1)[0] or None

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MediaError(FORMAT_ERROR_MESSAGE) from exc
    return encode_bytes(raw, mime_type=mime_type)


async def encode_media(source: MediaSource) -> InlineMedia:
    if isinstance(source, InlineMedia):
        return source
    if isinstance(source, str):
        return encode_data_url(source)
    if isinstance(source, StarletteUploadFile):
        return await encode_upload(source)
    raise MediaError(FORMAT_ERROR_MESSAGE)


def decode_media(media: InlineMedia) -> bytes:
    return base64.b64decode(media.data)
