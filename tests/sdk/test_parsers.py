import httpx
import pytest
from pydantic import BaseModel

from restclient import (
    JsonResponseParser,
    ModelResponseParser,
    ParseFailureError,
    ResponseParser,
)


class User(BaseModel):
    id: int
    name: str


class TestJsonResponseParser:
    def test_parse(self):
        response = httpx.Response(200, json={"id": 7})

        assert JsonResponseParser().parse(response) == {"id": 7}

    def test_parse_collection(self):
        response = httpx.Response(200, json=[{"id": 7}])

        assert JsonResponseParser().parse(response) == [{"id": 7}]

    @pytest.mark.parametrize("content", [b"", b"<html></html>", b"{broken"])
    def test_parse_invalid_json(self, content: bytes):
        response = httpx.Response(200, content=content)

        with pytest.raises(ParseFailureError) as exc_info:
            JsonResponseParser().parse(response)

        assert exc_info.value.response is response

    def test_parse_envelope(self):
        response = httpx.Response(200, json={"data": [1, 2], "meta": {}})

        assert JsonResponseParser(key="data").parse(response) == [1, 2]

    @pytest.mark.parametrize("body", [{"meta": {}}, [1, 2]])
    def test_parse_missing_envelope(self, body):
        response = httpx.Response(200, json=body)

        with pytest.raises(ParseFailureError):
            JsonResponseParser(key="data").parse(response)

    def test_satisfies_protocol(self):
        assert isinstance(JsonResponseParser(), ResponseParser)


class TestModelResponseParser:
    def test_parse(self):
        response = httpx.Response(200, json={"id": 7, "name": "Ada"})

        assert ModelResponseParser(User).parse(response) == User(id=7, name="Ada")

    def test_parse_collection_in_envelope(self):
        response = httpx.Response(200, json={"data": [{"id": 7, "name": "Ada"}]})

        users = ModelResponseParser(list[User], key="data").parse(response)

        assert users == [User(id=7, name="Ada")]

    def test_parse_shape_mismatch(self):
        response = httpx.Response(200, json={"id": "seven"})

        with pytest.raises(ParseFailureError) as exc_info:
            ModelResponseParser(User).parse(response)

        assert exc_info.value.response is response
