#!/usr/bin/env python3
"""Tests for BackendClient, with a fake requests session."""

import pytest
import requests

from garage.backend import BackendClient, BackendError


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no JSON")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def client_for(response=None, error=None):
    session = FakeSession(response, error)
    return BackendClient("http://backend:3001/", session=session), session


class TestForecast:
    """Tests for BackendClient.forecast."""

    def test_quotes_city(self):
        client, session = client_for(FakeResponse(body={"list": []}))
        assert client.forecast(" Sao Paulo ") == {"list": []}
        assert session.calls == [("http://backend:3001/weather/forecast/Sao%20Paulo", 10)]

    def test_empty_city(self):
        client, session = client_for()
        with pytest.raises(BackendError):
            client.forecast("  ")
        assert session.calls == []

    def test_error_body_message(self):
        client, _ = client_for(FakeResponse(404, {"error": "city not found"}))
        with pytest.raises(BackendError, match="city not found") as excinfo:
            client.forecast("Atlantis")
        assert excinfo.value.status == 404

    def test_error_without_body(self):
        client, _ = client_for(FakeResponse(502))
        with pytest.raises(BackendError, match="Error 502"):
            client.forecast("Lisbon")

    def test_connection_error(self):
        client, _ = client_for(error=requests.ConnectionError("refused"))
        with pytest.raises(BackendError, match="Could not reach the backend"):
            client.forecast("Lisbon")


class TestTips:
    """Tests for tips and featured."""

    def test_general_tips(self):
        client, session = client_for(FakeResponse(body=[{"tip": "Check tires"}, {"other": 1}]))
        assert client.tips() == ["Check tires"]
        assert session.calls[0][0] == "http://backend:3001/tips"

    def test_tips_for_type(self):
        client, session = client_for(FakeResponse(body=[{"tip": "Oil"}]))
        client.tips("Car")
        assert session.calls[0][0] == "http://backend:3001/tips/car"

    def test_tips_not_a_list(self):
        client, _ = client_for(FakeResponse(body={"tip": "Check tires"}))
        with pytest.raises(BackendError, match="invalid response"):
            client.tips()

    def test_featured_not_a_list(self):
        client, _ = client_for(FakeResponse(body={"model": "Corolla"}))
        with pytest.raises(BackendError, match="invalid response"):
            client.featured()

    def test_featured(self):
        body = [{"model": "Corolla", "year": 2024, "highlight": "x", "imageUrl": "y"}]
        client, session = client_for(FakeResponse(body=body))
        assert client.featured() == body
        assert session.calls[0][0] == "http://backend:3001/garage/featured"
