import asyncio
from contextlib import asynccontextmanager
import logging

import aiohttp
from yarl import URL

from nanoleaf_api.nanoleaf_errors import NanoleafHttpError, NanoleafUrlError

_LOGGER = logging.getLogger(__name__)

_HEADERS_GET = {"Accept": "application/json"}


class NanoleafApi(object):
    """HTTP transport bound to one device.

    Resolves paths relative to the base url and runs exactly one request per
    call. Holds no per-call state, so concurrent calls share the session.
    """

    def __init__(self, base_url: URL, session: aiohttp.ClientSession):
        """Init with the api base url and a reusable session."""
        self._base_url = base_url
        self._session = session

    @property
    def base_url(self) -> URL:
        return self._base_url

    def url(self, path: str) -> URL:
        """Resolve path against the base url.

        Raises NanoleafUrlError when path is malformed or resolves outside
        the base url.
        """
        try:
            url = self._base_url.join(URL(path))
            inside = (
                url.is_absolute()
                and url.origin() == self._base_url.origin()
                and url.path.startswith(self._base_url.path)
            )
        except (TypeError, ValueError) as ex:
            raise NanoleafUrlError(ex) from ex
        if not inside:
            raise NanoleafUrlError(
                ValueError(f"Path '{path}' resolves outside {self._base_url}: {url}")
            )
        return url

    @asynccontextmanager
    async def get(self, path: str):
        """API HTTP Get call."""
        url = self.url(path)
        async with self._api_request_internal(
            "GET",
            url,
            lambda: self._session.get(
                url=str(url), headers=_HEADERS_GET, allow_redirects=False
            ),
        ) as response:
            yield response

    @asynccontextmanager
    async def put(self, path: str, body: str):
        """API HTTP Put call."""
        url = self.url(path)
        async with self._api_request_internal(
            "PUT",
            url,
            lambda: self._session.put(url=str(url), data=body, allow_redirects=False),
        ) as response:
            yield response

    @asynccontextmanager
    async def post(self, path: str, body: str):
        """API HTTP Post call."""
        url = self.url(path)
        async with self._api_request_internal(
            "POST",
            url,
            lambda: self._session.post(url=str(url), data=body, allow_redirects=False),
        ) as response:
            yield response

    @asynccontextmanager
    async def delete(self, path: str):
        """API HTTP Delete call."""
        url = self.url(path)
        async with self._api_request_internal(
            "DELETE",
            url,
            lambda: self._session.delete(url=str(url), allow_redirects=False),
        ) as response:
            yield response

    @asynccontextmanager
    async def _api_request_internal(self, method: str, url: URL, request_lambda):
        """API Method handling all HTTP calls.

        aiohttp errors while connecting or reading the response are raised as
        NanoleafHttpError, everything else passes through.
        """
        _LOGGER.info("%s %s", method, url)
        try:
            async with request_lambda() as response:
                yield response
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            raise NanoleafHttpError(ex) from ex
