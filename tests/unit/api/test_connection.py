"""Unit tests for ZOSConnection and the encoding helpers."""

from __future__ import annotations

import base64

import pytest
from pydantic import ValidationError

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.api.encoding import encode_uri_component, get_auth_encoding
from zosmf_sdk.config.settings import reload_settings
from zosmf_sdk.shared.exceptions import InvalidParameterError


class TestZOSConnection:
    def test_base_url(self, connection) -> None:
        assert connection.base_url == "https://zos.example.com:10443"

    def test_port_alias(self) -> None:
        conn = ZOSConnection(host="h", port=443, user="u", password="p")
        assert conn.zosmf_port == 443

    @pytest.mark.parametrize("field", ["host", "user", "password"])
    def test_blank_fields_rejected(self, field: str) -> None:
        values = {"host": "h", "user": "u", "password": "p", field: "  "}
        with pytest.raises(ValidationError):
            ZOSConnection(**values)

    def test_host_and_user_stripped(self) -> None:
        conn = ZOSConnection(host=" h ", user=" u ", password="p")
        assert conn.host == "h"
        assert conn.user == "u"

    def test_password_kept_as_given(self) -> None:
        conn = ZOSConnection(host="h", user="u", password=" pass word ")
        assert conn.password == " pass word "
        assert get_auth_encoding(conn) == base64.b64encode(b"u: pass word ").decode("ascii")

    def test_password_hidden_in_repr(self, connection) -> None:
        assert "secret" not in repr(connection)

    def test_from_settings(self, monkeypatch) -> None:
        monkeypatch.setenv("ZOSMF_HOST", "mvs.example.com")
        monkeypatch.setenv("ZOSMF_PORT", "8443")
        monkeypatch.setenv("ZOSMF_USER", "tso1")
        monkeypatch.setenv("ZOSMF_PASSWORD", "pw")
        reload_settings()

        conn = ZOSConnection.from_settings()

        assert conn.base_url == "https://mvs.example.com:8443"
        assert conn.user == "tso1"

    def test_from_settings_missing_values(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            ZOSConnection.from_settings()
        assert "ZOSMF_HOST" in str(exc_info.value)

    def test_from_settings_port_out_of_range(self, monkeypatch) -> None:
        monkeypatch.setenv("ZOSMF_HOST", "mvs.example.com")
        monkeypatch.setenv("ZOSMF_PORT", "70000")
        monkeypatch.setenv("ZOSMF_USER", "tso1")
        monkeypatch.setenv("ZOSMF_PASSWORD", "pw")
        reload_settings()

        with pytest.raises(InvalidParameterError) as exc_info:
            ZOSConnection.from_settings()
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestEncoding:
    def test_encode_plain(self) -> None:
        assert encode_uri_component("JOB00123") == "JOB00123"

    def test_encode_special_characters(self) -> None:
        assert encode_uri_component("MY JOB$#@") == "MY%20JOB%24%23%40"

    def test_encode_keeps_unreserved_marks(self) -> None:
        assert encode_uri_component("a!b~c*d'e(f)") == "a!b~c*d'e(f)"

    def test_encode_slash(self) -> None:
        assert encode_uri_component("A/B") == "A%2FB"

    def test_encode_empty_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            encode_uri_component("")

    def test_auth_encoding(self, connection) -> None:
        # base64("ibmuser:secret")
        assert get_auth_encoding(connection) == "aWJtdXNlcjpzZWNyZXQ="
