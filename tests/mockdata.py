import asyncio
import json as jsonlib

from yarl import URL

HOST = "10.0.0.5"
PORT = 16021
API_URL = f"http://{HOST}:{PORT}/api/v1/"
TOKEN = "abcd"

JSON_AUTHORIZATION = {"auth_token": TOKEN}
JSON_RANGE_BRIGHTNESS = {"value": 42, "max": 100, "min": 0}
JSON_ON = {"value": True}
JSON_EFFECTS_LIST = ["Flow", "Static"]

# GET <token> on a canvas with rhythm module attached, firmware 5.x
JSON_PANEL_INFO = {
    "name": "Light Panels 50:e5:2b",
    "serialNo": "S19111B1234",
    "manufacturer": "Nanoleaf",
    "firmwareVersion": "5.1.0",
    "hardwareVersion": "2.0-4",
    "model": "NL29",
    "discovery": {},
    "effects": {"effectsList": ["Flow", "Static"], "select": "Flow"},
    "firmwareUpgrade": {},
    "panelLayout": {
        "globalOrientation": {"value": 120, "max": 360, "min": 0},
        "layout": {
            "numPanels": 2,
            "sideLength": 150,
            "positionData": [
                {"panelId": 107, "x": 74, "y": 43, "o": 180, "shapeType": 0},
                {"panelId": 162, "x": 149, "y": 0, "o": 60, "shapeType": 0},
            ],
        },
    },
    "rhythm": {
        "auxAvailable": None,
        "firmwareVersion": None,
        "hardwareVersion": None,
        "rhythmActive": None,
        "rhythmConnected": False,
        "rhythmId": None,
        "rhythmMode": None,
        "rhythmPos": None,
    },
    "schedules": {},
    "state": {
        "brightness": {"value": 100, "max": 100, "min": 0},
        "colorMode": "effect",
        "ct": {"value": 4000, "max": 6500, "min": 1200},
        "hue": {"value": 0, "max": 360, "min": 0},
        "on": {"value": True},
        "sat": {"value": 0, "max": 100, "min": 0},
    },
}

# same device on old firmware, no shapeType and no rhythm block
JSON_PANEL_INFO_OLD_FIRMWARE = {
    "name": "Nanoleaf Aurora",
    "serialNo": "S16351A1234",
    "manufacturer": "Nanoleaf",
    "firmwareVersion": "1.5.0",
    "model": "NL22",
    "effects": {"effectsList": ["Flames"], "select": "Flames"},
    "panelLayout": {
        "globalOrientation": {"value": 0, "max": 360, "min": 0},
        "layout": {
            "numPanels": 1,
            "sideLength": 150,
            "positionData": [{"panelId": 7, "x": 0, "y": 0, "o": 0}],
        },
    },
    "state": {
        "brightness": {"value": 50, "max": 100, "min": 0},
        "colorMode": "hs",
        "ct": {"value": 2700, "max": 6500, "min": 1200},
        "hue": {"value": 120, "max": 360, "min": 0},
        "on": {"value": False},
        "sat": {"value": 80, "max": 100, "min": 0},
    },
}

JSON_EFFECT_FLOW = {
    "animName": "Flow",
    "animType": "plugin",
    "colorType": "HSB",
    "palette": [
        {"hue": 0, "saturation": 100, "brightness": 100, "probability": 50},
        {"hue": 240, "saturation": 100, "brightness": 100, "probability": 50.5},
    ],
    "pluginType": "color",
    "pluginUuid": "027842e4-e1d6-4a4c-a731-be74a1ebd4cf",
    "pluginOptions": [
        {"name": "transTime", "value": 24},
        {"name": "loop", "value": True},
        {"name": "linDirection", "value": "right"},
    ],
    "version": "2.0",
}

JSON_EFFECT_STATIC = {
    "animName": "Static",
    "animType": "static",
    "colorType": "HSB",
    "animData": "1 107 1 255 0 0 0 20",
    "loop": False,
    "palette": [{"hue": 0, "saturation": 100, "brightness": 100}],
    "version": "1.0",
}

JSON_ANIMATIONS = {"animations": [JSON_EFFECT_FLOW, JSON_EFFECT_STATIC]}

JSON_PLUGINS = {
    "plugins": [
        {
            "uuid": "027842e4-e1d6-4a4c-a731-be74a1ebd4cf",
            "name": "Flow",
            "description": "Flow with colors",
            "type": "color",
            "pluginOptions": [{"name": "transTime", "type": "int"}],
        }
    ]
}


class MockAiohttpResponse:
    """Stands in for aiohttp's request context manager and response."""

    def __init__(
        self,
        *,
        status=200,
        json=None,
        text=None,
        error=None,
        delay=0,
        on_done=None,
        check_kwargs=lambda kwargs: True,
    ):
        self._status = status
        self._json = json
        self._text = text
        self._error = error
        self._delay = delay
        self._on_done = on_done
        self._check_kwargs = check_kwargs
        self.url = None

    def check_kwargs(self, kwargs):
        ok = self._check_kwargs(kwargs)
        if not ok:
            raise Exception(
                f"kwargs '{kwargs}' not ok, checked by lambda: '{self._check_kwargs}'"
            )
        self.url = URL(kwargs["url"])

    async def __aenter__(self):
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error:
            raise self._error
        if self._on_done:
            self._on_done()
        return self

    async def __aexit__(self, *error_info):
        return False

    @property
    def status(self):
        return self._status

    async def json(self, *, content_type="application/json", loads=jsonlib.loads):
        if self._json is not None:
            return self._json
        if not self._text:
            return None
        return loads(self._text)

    async def text(self, encoding=None, errors="strict"):
        if isinstance(self._text, bytes):
            return self._text.decode(encoding or "utf-8", errors)
        if self._text is not None:
            return self._text
        if self._json is not None:
            return jsonlib.dumps(self._json)
        return ""
