import base64
import io
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from fastapi import UploadFile
from starlette.datastructures import Headers

from advisory_fixtures import PNG_BYTES
from app.core.errors import ErrorKind, MediaError
from app.models.advisory import InlineMedia
from app.services.media import (
    FORMAT_ERROR_MESSAGE,
    READ_ERROR_MESSAGE,
    decode_media,
    encode_bytes,
    encode_data_url,
    encode_media,
    encode_upload,
)


class _BrokenUpload:
    filename = "hoja.jpg"
    content_type = "image/jpeg"

    async def read(self):
        raise OSError("disk error")


def _upload(data: bytes, filename: str, content_type: str = None) -> UploadFile:
    headers = Headers({"content-type": content_type}) if content_type else None
    return UploadFile(file=io.BytesIO(data), filename=filename, headers=headers)


class EncodeBytesTests(unittest.TestCase):
    def test_round_trip_reproduces_original_bytes(self) -> None:
        media = encode_bytes(PNG_BYTES, mime_type="image/png")
        self.assertEqual(decode_media(media), PNG_BYTES)
        self.assertEqual(base64.b64decode(media.data), PNG_BYTES)
        self.assertEqual(media.mime_type, "image/png")

    def test_media_type_is_guessed_from_filename(self) -> None:
        media = encode_bytes(b"\xff\xd8\xff", filename="cafeto.jpg")
        self.assertEqual(media.mime_type, "image/jpeg")

    def test_unknown_media_type_falls_back(self) -> None:
        media = encode_bytes(b"abc")
        self.assertEqual(media.mime_type, "application/octet-stream")

    def test_empty_payload_is_a_format_error(self) -> None:
        with self.assertRaises(MediaError) as ctx:
            encode_bytes(b"", mime_type="image/png")
        self.assertEqual(ctx.exception.message, FORMAT_ERROR_MESSAGE)
        self.assertEqual(ctx.exception.kind, ErrorKind.MEDIA)


class EncodeDataUrlTests(unittest.TestCase):
    def test_browser_data_url(self) -> None:
        payload = base64.b64encode(PNG_BYTES).decode("ascii")
        media = encode_data_url(f"data:image/png;base64,{payload}")
        self.assertEqual(media.mime_type, "image/png")
        self.assertEqual(decode_media(media), PNG_BYTES)

    def test_missing_payload_is_a_format_error(self) -> None:
        for value in ("data:image/png;base64,", "data:image/png;base64"):
            with self.assertRaises(MediaError) as ctx:
                encode_data_url(value)
            self.assertEqual(ctx.exception.message, FORMAT_ERROR_MESSAGE)

    def test_invalid_base64_is_a_format_error(self) -> None:
        with self.assertRaises(MediaError):
            encode_data_url("data:image/png;base64,***no-base64***")


class EncodeUploadTests(unittest.IsolatedAsyncioTestCase):
    async def test_upload_round_trip_keeps_declared_type(self) -> None:
        media = await encode_upload(_upload(PNG_BYTES, "hoja.png", "image/png"))
        self.assertEqual(decode_media(media), PNG_BYTES)
        self.assertEqual(media.mime_type, "image/png")

    async def test_upload_without_content_type_uses_filename(self) -> None:
        media = await encode_upload(_upload(PNG_BYTES, "hoja.png"))
        self.assertEqual(media.mime_type, "image/png")

    async def test_read_failure_is_a_media_error(self) -> None:
        with self.assertRaises(MediaError) as ctx:
            await encode_upload(_BrokenUpload())
        self.assertEqual(ctx.exception.message, READ_ERROR_MESSAGE)

    async def test_empty_upload_is_a_format_error(self) -> None:
        with self.assertRaises(MediaError) as ctx:
            await encode_upload(_upload(b"", "vacio.png", "image/png"))
        self.assertEqual(ctx.exception.message, FORMAT_ERROR_MESSAGE)

    async def test_encode_media_dispatches_on_source(self) -> None:
        inline = InlineMedia(data=base64.b64encode(b"x").decode(), mime_type="image/gif")
        self.assertIs(await encode_media(inline), inline)

        payload = base64.b64encode(PNG_BYTES).decode("ascii")
        from_url = await encode_media(f"data:image/png;base64,{payload}")
        self.assertEqual(decode_media(from_url), PNG_BYTES)

        from_upload = await encode_media(_upload(PNG_BYTES, "hoja.png", "image/png"))
        self.assertEqual(decode_media(from_upload), PNG_BYTES)

    async def test_unknown_source_is_a_format_error(self) -> None:
        for source in (123, {"data": "AAAA"}, ["data:image/png;base64,AAAA"]):
            with self.assertRaises(MediaError) as ctx:
                await encode_media(source)
            self.assertEqual(ctx.exception.message, FORMAT_ERROR_MESSAGE)

    async def test_read_failure_without_filename_is_a_media_error(self) -> None:
        class _NamelessUpload:
            content_type = None

            async def read(self):
                raise OSError("closed")

        with self.assertRaises(MediaError) as ctx:
            await encode_upload(_NamelessUpload())
        self.assertEqual(ctx.exception.message, READ_ERROR_MESSAGE)


if __name__ == "__main__":
    unittest.main()
