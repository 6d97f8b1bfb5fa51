"""Upstream TVmaze API access."""

from .client import TVMazeClient, UpstreamError, UpstreamPayloadError, UpstreamStatusError

__all__ = ["TVMazeClient", "UpstreamError", "UpstreamPayloadError", "UpstreamStatusError"]
