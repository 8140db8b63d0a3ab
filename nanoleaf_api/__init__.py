# flake8: noqa F401

"""Nanoleaf API client package."""
from .__version__ import VERSION
from .api import NanoleafApi
from .nanoleaf_api import API_PATH, DEFAULT_PORT, Nanoleaf
from .nanoleaf_dtos import (
    Animations,
    Authorization,
    Brightness,
    Effect,
    Effects,
    EffectsCommand,
    Increment,
    Layout,
    NanoleafModel,
    NanoleafState,
    On,
    PaletteColor,
    PanelInfo,
    PanelLayout,
    Plugin,
    PluginOption,
    Plugins,
    Position,
    Range,
    Rhythm,
    SetRange,
    SetValue,
    SetValueWithDuration,
    State,
    decode_brightness,
    decode_set_range,
    encode_effect,
    encode_setting,
)
from .nanoleaf_errors import (
    NanoleafDecodeError,
    NanoleafError,
    NanoleafHttpError,
    NanoleafStatusError,
    NanoleafUrlError,
)
