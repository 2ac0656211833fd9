"""
Tests for RequestDescriptor and the Ok / Error result types.
"""

import pytest
import requests

from http_client_telemetry.core.request import Error, Ok, RequestDescriptor


class TestRequestDescriptorBuild:
    """RequestDescriptor.build()."""

    def test_full_url(self):
        request = RequestDescriptor.build("get", "https://api.example.com:8443/v1/items?page=2")

        assert request.scheme == "https"
        assert request.host == "api.example.com"
        assert request.port == 8443
        assert request.path == "/v1/items"
        assert request.query == "page=2"
        assert request.method == "GET"
        assert request.target == "/v1/items?page=2"

    @pytest.mark.parametrize("url,port", [
        ("https://api.example.com/x", 443),
        ("http://api.example.com/x", 80),
    ])
    def test_default_port_by_scheme(self, url, port):
        assert RequestDescriptor.build("GET", url).port == port

    def test_empty_path_becomes_root(self):
        request = RequestDescriptor.build("GET", "https://api.example.com")
        assert request.path == "/"
        assert request.target == "/"

    def test_invalid_port_does_not_raise(self):
        request = RequestDescriptor.build("GET", "https://api.example.com:99999/x")
        assert request.port == 443

    def test_headers_are_frozen(self):
        request = RequestDescriptor.build("GET", "https://a.b/", headers={"Accept": "json"})

        assert request.headers["Accept"] == "json"
        with pytest.raises(TypeError):
            request.headers["X"] = "y"

    def test_immutable(self):
        request = RequestDescriptor.build("GET", "https://a.b/")
        with pytest.raises(Exception):  # frozen dataclass
            request.method = "POST"


class TestResult:
    """Ok / Error tagged result."""

    def test_ok(self):
        response = requests.Response()
        response.status_code = 204
        result = Ok(response)

        assert result.is_ok() is True
        assert result.is_error() is False
        assert result.response.status_code == 204

    def test_error(self):
        reason = ValueError("nope")
        result = Error(reason)

        assert result.is_ok() is False
        assert result.is_error() is True
        assert result.reason is reason

    def test_error_reason_can_be_any_value(self):
        assert Error({"code": "closed"}).reason == {"code": "closed"}
