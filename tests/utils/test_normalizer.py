import json

import httpx
import pytest

from apitemplate import (
    ApiError,
    Blob,
    Config,
    ContentTypeCategory,
    HttpxResponse,
    OperationFailedError,
    ResponseParseError,
    get_error_message,
    make_api_error,
    parse_response,
)


class TestGetErrorMessage:
    @pytest.mark.parametrize("payload", [None, "", {}, [], 0])
    def test_falsy_payload_uses_fallback(self, payload):
        assert get_error_message(payload, "fallback") == "fallback"

    def test_string_payload_is_the_message(self):
        assert get_error_message("Bad Gateway", "fallback") == "Bad Gateway"

    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"message": "m", "error": "e"}, "m"),
            ({"error": "e", "detail": "d"}, "e"),
            ({"detail": "d", "msg": "x"}, "d"),
            ({"msg": "x", "title": "t"}, "x"),
            ({"title": "t"}, "t"),
            ({"message": "", "detail": "d"}, "d"),
        ],
    )
    def test_field_priority(self, payload, expected):
        assert get_error_message(payload, "fallback") == expected

    def test_mapping_without_known_fields(self):
        assert get_error_message({"code": 17}, "fallback") == "fallback"

    def test_other_shapes_use_fallback(self):
        assert get_error_message(["boom"], "fallback") == "fallback"
        assert get_error_message(42, "fallback") == "fallback"

    def test_non_string_hit_is_stringified(self):
        assert get_error_message({"error": {"code": 1}}, "f") == "{'code': 1}"

    def test_custom_fields(self):
        payload = {"message": "ignored", "reason": "quota"}

        assert get_error_message(payload, "f", fields=["reason"]) == "quota"


class TestMakeApiError:
    def test_carries_message_status_and_data(self):
        err = make_api_error("nope", 409, {"id": 1})

        assert isinstance(err, ApiError)
        assert str(err) == "nope"
        assert (err.message, err.status, err.data) == ("nope", 409, {"id": 1})


class TestParseJson:
    @pytest.mark.asyncio
    async def test_returns_parsed_body(self, make_response):
        response = make_response(body={"id": 1})

        assert await parse_response(response, ContentTypeCategory.JSON) == {"id": 1}

    @pytest.mark.asyncio
    async def test_failure_marker_raises(self, make_response):
        body = {"type": "FALSE", "error": "bad input"}
        response = make_response(body=body)

        with pytest.raises(OperationFailedError) as exc_info:
            await parse_response(response, ContentTypeCategory.JSON)

        assert exc_info.value.message == "bad input"
        assert exc_info.value.status == 400
        assert exc_info.value.data == body

    @pytest.mark.asyncio
    async def test_failure_marker_without_message(self, make_response):
        response = make_response(body={"type": "FALSE"})

        with pytest.raises(OperationFailedError, match="Operation failed"):
            await parse_response(response, ContentTypeCategory.JSON)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("marker", ["TRUE", "false", False, None])
    async def test_other_marker_values_pass(self, make_response, marker):
        body = {"type": marker, "value": 1}

        assert await parse_response(make_response(body=body), "json") == body

    @pytest.mark.asyncio
    async def test_lists_are_returned_as_is(self, make_response):
        body = [{"type": "FALSE"}]

        assert await parse_response(make_response(body=body), "json") == body

    @pytest.mark.asyncio
    async def test_configurable_marker(self, make_response):
        config = Config(failure_marker_field="status", failure_marker_value="ERR")
        response = make_response(body={"status": "ERR", "msg": "denied"})

        with pytest.raises(OperationFailedError, match="denied"):
            await parse_response(response, ContentTypeCategory.JSON, config)

    @pytest.mark.asyncio
    async def test_undecodable_body(self, make_response):
        response = make_response(
            text="<html>",
            json_error=json.JSONDecodeError("Expecting value", "<html>", 0),
        )

        with pytest.raises(ResponseParseError) as exc_info:
            await parse_response(response, ContentTypeCategory.JSON)

        assert exc_info.value.status == 200
        assert exc_info.value.data == "<html>"


class TestParseBinary:
    @pytest.mark.asyncio
    async def test_blob_with_filename(self):
        response = HttpxResponse(
            httpx.Response(
                200,
                content=b"%PDF-1.7",
                headers={
                    "Content-Type": "application/pdf",
                    "Content-Disposition": 'attachment; filename="invoice 7.pdf"',
                },
            )
        )

        blob = await parse_response(response, ContentTypeCategory.BLOB)

        assert isinstance(blob, Blob)
        assert blob.content == b"%PDF-1.7"
        assert blob.content_type == "application/pdf"
        assert blob.filename == "invoice 7.pdf"

    @pytest.mark.asyncio
    async def test_blob_without_disposition(self):
        response = HttpxResponse(httpx.Response(200, content=b"\x89PNG"))

        blob = await parse_response(response, ContentTypeCategory.BLOB)

        assert blob.filename is None

    @pytest.mark.asyncio
    async def test_unquoted_filename_is_not_matched(self):
        response = HttpxResponse(
            httpx.Response(
                200,
                content=b"x",
                headers={"Content-Disposition": "attachment; filename=report.csv"},
            )
        )

        blob = await parse_response(response, ContentTypeCategory.BLOB)

        assert blob.filename is None

    @pytest.mark.asyncio
    async def test_blob_falls_back_to_bytes(self, make_response):
        response = make_response(content=b"zip")

        assert await parse_response(response, ContentTypeCategory.BLOB) == b"zip"

    @pytest.mark.asyncio
    async def test_blob_falls_back_to_text(self, make_response):
        response = make_response(text="plain")

        assert await parse_response(response, ContentTypeCategory.BLOB) == "plain"

    @pytest.mark.asyncio
    async def test_array_buffer(self):
        response = HttpxResponse(httpx.Response(200, content=b"\x00\x01"))

        result = await parse_response(response, ContentTypeCategory.ARRAY_BUFFER)

        assert result == b"\x00\x01"

    @pytest.mark.asyncio
    async def test_array_buffer_falls_back_to_text(self, make_response):
        response = make_response(text="plain")

        result = await parse_response(response, ContentTypeCategory.ARRAY_BUFFER)

        assert result == "plain"


class TestParseText:
    @pytest.mark.asyncio
    async def test_text(self):
        response = HttpxResponse(httpx.Response(200, text="héllo"))

        assert await parse_response(response, ContentTypeCategory.TEXT) == "héllo"
