"""Async HTTP session for the Windows Device Portal REST API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..errors import TransportError
from ..settings import PortalSettings

LOGGER = logging.getLogger("holoportal.network")

ModelT = TypeVar("ModelT", bound=BaseModel)


class PortalSession:
    def __init__(
        self,
        settings: PortalSettings,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings
        self._client = client or httpx.AsyncClient(
            timeout=settings.timeout,
            verify=settings.verify_tls,
        )

    async def __aenter__(self) -> "PortalSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def build_endpoint(self, path: str, query: str | None = None) -> str:
        base = self.settings.base_url.rstrip("/")
        if not base:
            raise TransportError("Portal URL missing")
        url = f"{base}/{path.lstrip('/')}"
        if query:
            url = f"{url}?{query}"
        return url

    async def get_model(self, path: str, model: Type[ModelT]) -> ModelT:
        url = self.build_endpoint(path)
        LOGGER.debug("GET %s", url)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
            return model.model_validate_json(resp.content)
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"GET {path} failed: {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except ValidationError as exc:
            raise TransportError(f"Invalid response from {path}: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(str(exc)) from exc

    @asynccontextmanager
    async def open_stream(self, path: str) -> AsyncIterator[httpx.Response]:
        """Open a raw GET stream; the response is closed when the block exits."""
        url = self.build_endpoint(path)
        LOGGER.debug("GET (stream) %s", url)
        try:
            async with self._client.stream("GET", url) as resp:
                resp.raise_for_status()
                yield resp
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"GET {path} failed: {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(str(exc)) from exc

    async def post(self, path: str, payload: str | None = None) -> None:
        url = self.build_endpoint(path, payload)
        LOGGER.debug("POST %s", url)
        try:
            resp = await self._client.post(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"POST {path} failed: {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(str(exc)) from exc

    async def aclose(self) -> None:
        await self._client.aclose()
