import pytest

from restclient import JsonResponseParser, RestClient


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("RESTCLIENT_ENDPOINT", raising=False)
    monkeypatch.delenv("RESTCLIENT_BODY_TYPE", raising=False)
    monkeypatch.delenv("RESTCLIENT_TIMEOUT", raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def endpoint() -> str:
    return "http://api.test"


@pytest.fixture
def base_url(endpoint: str) -> str:
    return f"{endpoint}/"


@pytest.fixture
def parser() -> JsonResponseParser:
    return JsonResponseParser()


@pytest.fixture
def client(endpoint: str, parser: JsonResponseParser) -> RestClient:
    return RestClient(endpoint, parser)
