"""
Tests for request logging middleware and logging helpers.
"""

import json
from unittest.mock import MagicMock

import pytest

from showgraph.logging import (
    add_request_id,
    clear_request_context,
    request_id_ctx,
    set_request_context,
)
from showgraph.middleware import extract_graphql_operation_name, sanitize_query_params


def make_request(method="POST", path="/graphql", params=None, body=b""):
    """Create a mock FastAPI request."""
    request = MagicMock()
    request.method = method
    request.url.path = path
    request.query_params = params or {}

    async def read_body():
        return body

    request.body = read_body
    return request


class TestExtractGraphqlOperationName:
    """Tests for extract_graphql_operation_name."""

    @pytest.mark.asyncio
    async def test_explicit_operation_name(self):
        body = json.dumps({"operationName": "Show", "query": "query Show { show(id: 1) { name } }"})

        assert await extract_graphql_operation_name(make_request(body=body.encode())) == "Show"

    @pytest.mark.asyncio
    async def test_named_query_in_post_body(self):
        body = json.dumps({"query": "query Schedule { schedule { name } }"})

        assert await extract_graphql_operation_name(make_request(body=body.encode())) == "Schedule"

    @pytest.mark.asyncio
    async def test_anonymous_query_in_get(self):
        request = make_request(method="GET", params={"query": "{ schedule { name } }"})

        assert await extract_graphql_operation_name(request) == "unnamed_operation"

    @pytest.mark.asyncio
    async def test_introspection(self):
        request = make_request(method="GET", params={"query": "{ __schema { types { name } } }"})

        assert await extract_graphql_operation_name(request) == "__introspection"

    @pytest.mark.asyncio
    async def test_invalid_json_body(self):
        assert await extract_graphql_operation_name(make_request(body=b"{not json")) is None

    @pytest.mark.asyncio
    async def test_other_paths_are_ignored(self):
        assert await extract_graphql_operation_name(make_request(path="/health")) is None


class TestSanitizeQueryParams:
    """Tests for sanitize_query_params."""

    def test_redacts_graphql_payload(self):
        request = make_request(
            method="GET",
            params={"query": "{ schedule { name } }", "variables": "{}", "operationName": "S"},
        )

        assert sanitize_query_params(request) == {
            "query": "[REDACTED]",
            "variables": "[REDACTED]",
            "operationName": "S",
        }

    def test_other_paths_untouched(self):
        request = make_request(method="GET", path="/health", params={"query": "x"})

        assert sanitize_query_params(request) == {"query": "x"}

    def test_no_params(self):
        assert sanitize_query_params(make_request(method="GET")) is None


class TestRequestContext:
    """Tests for request-id context handling."""

    def test_generated_ids_are_unique(self):
        ids = set()
        for _ in range(100):
            ids.add(set_request_context())
        clear_request_context()

        assert len(ids) == 100

    def test_set_and_clear(self):
        assert set_request_context("req-1") == "req-1"
        assert request_id_ctx.get() == "req-1"

        clear_request_context()
        assert request_id_ctx.get() is None

    def test_processor_adds_request_id(self):
        set_request_context("req-2")
        try:
            event = add_request_id(None, "info", {"event": "hello"})
        finally:
            clear_request_context()

        assert event == {"event": "hello", "request_id": "req-2"}

    def test_processor_without_context(self):
        clear_request_context()

        assert add_request_id(None, "info", {"event": "hello"}) == {"event": "hello"}
