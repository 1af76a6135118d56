import ssl

import certifi
import pytest

from restclient._utils._ssl_context import (
    _env_path,
    create_ssl_context,
    get_httpx_client_kwargs,
)


class TestSslContext:
    def test_env_path_expands_home_and_vars(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOME", "/home/ada")
        monkeypatch.setenv("CERTS", "certs")
        monkeypatch.setenv("SSL_CERT_FILE", "~/$CERTS/ca.pem")

        assert _env_path("SSL_CERT_FILE") == "/home/ada/certs/ca.pem"

    def test_env_path_empty_is_none(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SSL_CERT_DIR", "")

        assert _env_path("SSL_CERT_DIR") is None

    def test_cert_file_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("REQUESTS_CA_BUNDLE", raising=False)
        monkeypatch.delenv("SSL_CERT_DIR", raising=False)
        monkeypatch.setenv("SSL_CERT_FILE", certifi.where())

        assert isinstance(create_ssl_context(), ssl.SSLContext)

    def test_missing_cert_file_fails(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        monkeypatch.setenv("SSL_CERT_FILE", str(tmp_path / "missing.pem"))

        with pytest.raises(FileNotFoundError):
            create_ssl_context()

    def test_client_kwargs(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("SSL_CERT_FILE", raising=False)
        monkeypatch.delenv("REQUESTS_CA_BUNDLE", raising=False)
        monkeypatch.delenv("SSL_CERT_DIR", raising=False)

        kwargs = get_httpx_client_kwargs(5.0)

        assert isinstance(kwargs["verify"], ssl.SSLContext)
        assert kwargs["timeout"] == 5.0
        assert kwargs["follow_redirects"] is False
