"""Nanoleaf API client package."""

import json
import logging
from typing import Any, Dict, List, Optional, Union

import aiohttp
from yarl import URL

from nanoleaf_api.__version__ import VERSION
from nanoleaf_api.api import NanoleafApi
from nanoleaf_api.nanoleaf_dtos import (
    Animations,
    Authorization,
    Brightness,
    Effect,
    EffectsCommand,
    NanoleafState,
    On,
    PanelInfo,
    Plugins,
    Range,
    SetRange,
    encode_effect,
    encode_setting,
    from_json,
)
from nanoleaf_api.nanoleaf_errors import (
    NanoleafDecodeError,
    NanoleafStatusError,
    NanoleafUrlError,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_PORT = 16021
API_PATH = "/api/v1/"


class Nanoleaf(object):
    """Nanoleaf client.

    Every method is a coroutine, nothing is sent before it is awaited.
    The token returned by add_user() is passed to all other calls and
    becomes part of the request path.
    """

    async def __aenter__(self, *args, **kwargs):
        """Async context manager enter."""
        if not self._session:
            # no total timeout, callers impose their own
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=None)
            )
            self._owns_session = True
        self._api = NanoleafApi(self._base_url, self._session)
        return self

    async def __aexit__(self, *err):
        """Async context manager exit."""
        if self._session and self._owns_session:
            await self._session.close()
            self._session = None
            self._owns_session = False
            self._api = None

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        *,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Init with the device address, optionally sharing a session."""
        _LOGGER.debug("nanoleaf_api v%s", VERSION)
        try:
            self._base_url = URL.build(scheme="http", host=host, port=port, path=API_PATH)
        except (TypeError, ValueError) as ex:
            raise NanoleafUrlError(ex) from ex
        self._session = session
        self._owns_session = False
        self._api = None
        if session:
            self._api = NanoleafApi(self._base_url, session)

    @classmethod
    async def create(
        cls,
        host: str,
        port: int = DEFAULT_PORT,
        *,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Use create method if you want to use this Client without an async context manager."""
        self = Nanoleaf(host, port, session=session)
        await self.__aenter__()
        return self

    async def close(self):
        """Use close when your are finished with the Client without using an async context manager."""
        await self.__aexit__()

    @property
    def base_url(self) -> URL:
        return self._base_url

    # users

    async def add_user(self) -> Authorization:
        """Pair with the device, the pairing button must have been held before."""
        return await self._post_value("new", "", Authorization)

    async def delete_user(self, token: str) -> None:
        """Revoke a token."""
        await self._delete_value(token)

    # panel info

    async def get_panels(self, token: str) -> PanelInfo:
        """All information the device has about itself."""
        return await self._get_value(token, PanelInfo)

    async def identify(self, token: str) -> None:
        """Flash the panels."""
        await self._put_body(f"{token}/identify", "")

    # power

    async def get_state(self, token: str) -> On:
        return await self._get_value(f"{token}/state/on", On)

    async def set_state(self, token: str, state: Union[NanoleafState, bool]) -> None:
        if isinstance(state, NanoleafState):
            state = state.value
        await self._put_value(f"{token}/state", "on", {"value": bool(state)})

    # brightness, hue, saturation and color temperature

    async def get_brightness(self, token: str) -> Range:
        return await self._get_value(f"{token}/state/brightness", Range)

    async def set_brightness(self, token: str, brightness: Brightness) -> None:
        await self._put_value(
            f"{token}/state", "brightness", encode_setting(brightness)
        )

    async def get_hue(self, token: str) -> Range:
        return await self._get_value(f"{token}/state/hue", Range)

    async def set_hue(self, token: str, hue: SetRange) -> None:
        await self._put_value(f"{token}/state", "hue", encode_setting(hue))

    async def get_saturation(self, token: str) -> Range:
        return await self._get_value(f"{token}/state/sat", Range)

    async def set_saturation(self, token: str, sat: SetRange) -> None:
        await self._put_value(f"{token}/state", "sat", encode_setting(sat))

    async def get_ct(self, token: str) -> Range:
        """Color temperature in kelvin."""
        return await self._get_value(f"{token}/state/ct", Range)

    async def set_ct(self, token: str, ct: SetRange) -> None:
        await self._put_value(f"{token}/state", "ct", encode_setting(ct))

    # color mode

    async def get_color_mode(self, token: str) -> str:
        # the device serves color mode and effect from the same endpoint
        return await self._get_value(f"{token}/effects/select", str)

    # effects

    async def get_effect(self, token: str) -> str:
        """Name of the active effect."""
        return await self._get_value(f"{token}/effects/select", str)

    async def list_effects(self, token: str) -> List[str]:
        return await self._get_value(f"{token}/effects/effectsList", List[str])

    async def set_effect(self, token: str, effect: str) -> None:
        await self._put_value(f"{token}/effects", "select", effect)

    async def get_all_effects(self, token: str) -> Animations:
        """Every installed effect with its palette and plugin settings."""
        return await self._write_effects(
            token, EffectsCommand.REQUEST_ALL, data_class=Animations
        )

    async def get_effect_details(self, token: str, name: str) -> Effect:
        return await self._write_effects(
            token, EffectsCommand.REQUEST, {"animName": name}, data_class=Effect
        )

    async def get_plugins(self, token: str) -> Plugins:
        """Plugins effects can be built from."""
        return await self._write_effects(
            token, EffectsCommand.REQUEST_PLUGINS, data_class=Plugins
        )

    async def display_effect(self, token: str, effect: Effect) -> None:
        """Show an effect without installing it."""
        await self._write_effects(token, EffectsCommand.DISPLAY, encode_effect(effect))

    async def display_effect_temp(
        self, token: str, effect: Effect, duration: int
    ) -> None:
        """Show an effect for duration seconds, then return to the previous one."""
        params = encode_effect(effect)
        params["duration"] = duration
        await self._write_effects(token, EffectsCommand.DISPLAY_TEMP, params)

    async def add_effect(self, token: str, effect: Effect) -> None:
        """Install an effect, an existing one with the same name is replaced."""
        await self._write_effects(token, EffectsCommand.ADD, encode_effect(effect))

    async def delete_effect(self, token: str, name: str) -> None:
        await self._write_effects(token, EffectsCommand.DELETE, {"animName": name})

    # helpers

    def _get_api(self) -> NanoleafApi:
        if not self._api:
            raise RuntimeError(
                "Client is closed, use 'async with Nanoleaf(...)' or Nanoleaf.create()."
            )
        return self._api

    async def _write_effects(
        self,
        token: str,
        command: EffectsCommand,
        params: Optional[Dict[str, Any]] = None,
        *,
        data_class: Any = None,
    ) -> Any:
        """Send a command to the effects 'write' endpoint."""
        write = {"command": command.value}
        if params:
            write.update(params)
        return await self._put_value(
            f"{token}/effects", "write", write, data_class=data_class
        )

    async def _check_status(self, response) -> None:
        """Raise NanoleafStatusError unless the status is 2xx."""
        if not 200 <= response.status < 300:
            # the body is only informative, never fails the status check
            text = await response.text(errors="replace")
            raise NanoleafStatusError(response.status, str(response.url), text)

    async def _read_value(self, response, data_class: Any) -> Any:
        await self._check_status(response)
        try:
            data = await response.json(content_type=None)
        except ValueError as ex:
            # json.JSONDecodeError
            raise NanoleafDecodeError(ex) from ex
        result = from_json(data_class, data)
        _LOGGER.debug("%s from %s: %s", result, response.url, data)
        return result

    async def _get_value(self, path: str, data_class: Any) -> Any:
        async with self._get_api().get(path) as response:
            return await self._read_value(response, data_class)

    async def _delete_value(self, path: str) -> None:
        async with self._get_api().delete(path) as response:
            await self._check_status(response)

    async def _post_value(self, path: str, body: str, data_class: Any) -> Any:
        async with self._get_api().post(path, body) as response:
            return await self._read_value(response, data_class)

    async def _put_body(self, path: str, body: str, data_class: Any = None) -> Any:
        async with self._get_api().put(path, body) as response:
            if data_class is None:
                # device answers 204 No Content
                await self._check_status(response)
                return None
            return await self._read_value(response, data_class)

    async def _put_value(
        self, path: str, key: str, value: Any, data_class: Any = None
    ) -> Any:
        """Put {key: value} as json."""
        body = json.dumps({key: value})
        _LOGGER.debug("put %s: %s", path, body)
        return await self._put_body(path, body, data_class)
