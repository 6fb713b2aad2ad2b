"""Pytest configuration helpers."""

from __future__ import annotations

import httpx
import pytest

from holoportal.services.network import PortalSession
from holoportal.settings import PortalSettings


class TrackingStream(httpx.AsyncByteStream):
    """Response body that remembers whether it was closed."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.closed = False

    async def __aiter__(self):
        if self.data:
            yield self.data

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture()
def make_session():
    def factory(handler, **overrides) -> PortalSession:
        values = {"base_url": "https://hololens.local", "platform": "HoloLens"}
        values.update(overrides)
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return PortalSession(PortalSettings(**values), client=client)

    return factory


@pytest.fixture()
def tracking_stream():
    return TrackingStream
