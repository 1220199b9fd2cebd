"""Unit tests for response dispatch."""
from __future__ import annotations

from unittest.mock import Mock

import pytest

from stats_service.features.stats.dispatcher import dispatch
from stats_service.features.stats.schemas import OutputFormat, StatsQuery, UnsupportedMethod


@pytest.mark.unit
class TestDispatch:
    """Test suite for dispatch."""

    def test_unsupported_method_is_405_without_rendering(self):
        """405 with empty body, and the body renderer never runs."""
        render_body = Mock()

        response = dispatch(UnsupportedMethod("POST"), render_body)

        assert response.status_code == 405
        assert response.reason == "Method Not Allowed"
        assert response.body == ""
        assert response.headers["Allow"] == "GET"
        render_body.assert_not_called()

    @pytest.mark.parametrize(
        ("output_format", "content_type"),
        [
            (OutputFormat.PLAIN, "text/plain; charset=utf-8"),
            (OutputFormat.JSON, "application/json"),
            (OutputFormat.MONITOR, "application/json"),
        ],
    )
    def test_query_is_200_with_rendered_body(self, output_format, content_type):
        """A parsed query renders once and answers 200."""
        query = StatsQuery(output_format, ("a",))
        render_body = Mock(return_value="a=1\n")

        response = dispatch(query, render_body)

        assert response.status_code == 200
        assert response.reason == "OK"
        assert response.body == "a=1\n"
        assert response.output_format is output_format
        assert response.headers["Content-Type"] == content_type
        render_body.assert_called_once_with(query)
