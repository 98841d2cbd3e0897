"""
Shows Review — Middleware Tests
================================

What:  Request ID propagation and access-log levels.
"""

import logging

import pytest

from showsreview.middleware.logging import level_for_status
from showsreview.middleware.request_id import REQUEST_ID_HEADER


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/")

        rid = response.headers[REQUEST_ID_HEADER]
        assert len(rid) == 8

    @pytest.mark.asyncio
    async def test_client_id_echoed(self, test_client):
        response = await test_client.get("/movies", headers={REQUEST_ID_HEADER: "trace-123"})
        assert response.headers[REQUEST_ID_HEADER] == "trace-123"

    @pytest.mark.asyncio
    async def test_present_on_not_found(self, test_client):
        response = await test_client.get("/nonexistent")

        assert response.status_code == 404
        assert REQUEST_ID_HEADER in response.headers


class TestAccessLog:

    @pytest.mark.parametrize(
        "status, level",
        [(200, logging.INFO), (304, logging.INFO), (404, logging.WARNING), (500, logging.ERROR)],
    )
    def test_level_for_status(self, status, level):
        assert level_for_status(status) == level

    @pytest.mark.asyncio
    async def test_not_found_logged_as_warning(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="showsreview.access"):
            await test_client.get("/nonexistent")

        records = [r for r in caplog.records if r.name == "showsreview.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].status == 404
        assert records[0].path == "/nonexistent"
