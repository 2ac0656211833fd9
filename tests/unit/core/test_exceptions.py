"""
Tests for the exception hierarchy and requests exception classification.
"""

import pytest
import requests

from http_client_telemetry.core.exceptions import (
    ConnectionError,
    FatalError,
    HTTPClientException,
    HTTPError,
    InvalidRequestError,
    NotFoundError,
    ProxyError,
    ServerError,
    TemporaryError,
    TimeoutError,
    classify_requests_exception,
    classify_status,
)

URL = "https://api.example.com/users"


class TestHierarchy:
    def test_message_attribute(self):
        exc = HTTPClientException("Test error")
        assert exc.message == "Test error"
        assert str(exc) == "Test error"

    def test_temporary_and_fatal_branches(self):
        assert isinstance(TimeoutError("t", URL), TemporaryError)
        assert isinstance(ServerError(503, URL), TemporaryError)
        assert isinstance(NotFoundError(URL), FatalError)
        assert isinstance(NotFoundError(URL), HTTPError)

    def test_server_error_message(self):
        exc = ServerError(502, URL, "Bad Gateway")
        assert exc.status_code == 502
        assert str(exc) == f"HTTP 502 error for {URL}: Bad Gateway"


class TestClassifyStatus:
    @pytest.mark.parametrize("status", [200, 201, 204, 301, 399])
    def test_success_codes(self, status):
        assert classify_status(status, URL) is None

    def test_404(self):
        assert isinstance(classify_status(404, URL), NotFoundError)

    def test_4xx(self):
        exc = classify_status(422, URL)
        assert type(exc) is HTTPError
        assert exc.status_code == 422

    def test_5xx(self):
        exc = classify_status(503, URL)
        assert isinstance(exc, ServerError)
        assert isinstance(exc, TemporaryError)


class TestClassifyRequestsException:
    def test_connect_timeout(self):
        exc = classify_requests_exception(requests.exceptions.ConnectTimeout("x"), URL)
        assert isinstance(exc, TimeoutError)
        assert exc.message == "connect timeout"
        assert exc.timeout_type == "connect"
        assert exc.url == URL

    def test_read_timeout(self):
        exc = classify_requests_exception(requests.exceptions.ReadTimeout("x"), URL)
        assert isinstance(exc, TimeoutError)
        assert exc.timeout_type == "read"

    def test_proxy_error(self):
        exc = classify_requests_exception(requests.exceptions.ProxyError("bad proxy"), URL)
        assert isinstance(exc, ProxyError)

    def test_connection_error(self):
        exc = classify_requests_exception(requests.exceptions.ConnectionError("refused"), URL)
        assert isinstance(exc, ConnectionError)
        assert "refused" in exc.message

    @pytest.mark.parametrize("error_class", [
        requests.exceptions.MissingSchema,
        requests.exceptions.InvalidSchema,
        requests.exceptions.InvalidURL,
    ])
    def test_invalid_request(self, error_class):
        exc = classify_requests_exception(error_class("bad url"), "bad url")
        assert isinstance(exc, InvalidRequestError)
        assert isinstance(exc, FatalError)

    def test_http_error(self):
        response = requests.Response()
        response.status_code = 500
        exc = classify_requests_exception(requests.exceptions.HTTPError(response=response), URL)
        assert isinstance(exc, ServerError)

    def test_unknown(self):
        exc = classify_requests_exception(requests.exceptions.RequestException(), URL)
        assert type(exc) is HTTPClientException
        assert exc.message == "RequestException"
