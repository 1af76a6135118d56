import pydantic_core
import pytest

from restclient import (
    BodyType,
    Config,
    EndpointMissingError,
    JsonResponseParser,
    ResponseParserMissingError,
    RestClient,
)


class TestClientConfig:
    def test_no_endpoint(self):
        with pytest.raises(EndpointMissingError):
            RestClient(response_parser=JsonResponseParser())

    def test_no_response_parser(self, endpoint: str):
        with pytest.raises(ResponseParserMissingError):
            RestClient(endpoint)

    def test_response_parser_without_parse(self, endpoint: str):
        with pytest.raises(TypeError):
            RestClient(endpoint, object())  # type: ignore[arg-type]

    def test_config_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RESTCLIENT_ENDPOINT", "https://example.com/api")
        monkeypatch.setenv("RESTCLIENT_BODY_TYPE", "json")
        monkeypatch.setenv("RESTCLIENT_TIMEOUT", "5")

        client = RestClient(response_parser=JsonResponseParser())

        assert client.endpoint == "https://example.com/api/"
        assert client.body_type == BodyType.JSON
        assert client._config.timeout == 5.0

    def test_config_from_constructor(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RESTCLIENT_ENDPOINT", "https://ignored.example.com")

        client = RestClient(
            "https://example.com/api/",
            JsonResponseParser(),
            body_type=BodyType.JSON,
            timeout=2.5,
        )

        assert client.endpoint == "https://example.com/api/"
        assert client.body_type == BodyType.JSON
        assert client._config.timeout == 2.5

    def test_default_body_type_is_form(self, client: RestClient):
        assert client.body_type == BodyType.FORM


class TestConfig:
    @pytest.mark.parametrize(
        "endpoint",
        ["http://api.test", "http://api.test/", "http://api.test//"],
    )
    def test_endpoint_normalized(self, endpoint: str):
        assert Config(endpoint=endpoint).endpoint == "http://api.test/"

    def test_invalid_endpoint(self):
        with pytest.raises(pydantic_core.ValidationError):
            Config(endpoint="not a url")

    def test_missing_endpoint(self):
        with pytest.raises(pydantic_core.ValidationError) as exc_info:
            Config(endpoint=None)  # type: ignore[arg-type]

        assert exc_info.value.errors(include_url=False)[0]["loc"] == ("endpoint",)

    def test_invalid_timeout(self):
        with pytest.raises(pydantic_core.ValidationError):
            Config(endpoint="http://api.test", timeout=0)

    def test_unknown_body_type(self):
        with pytest.raises(pydantic_core.ValidationError):
            Config(endpoint="http://api.test", body_type="xml")
