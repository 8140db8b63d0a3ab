"""dto's used in the Nanoleaf API"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    conint,
)
from pydantic.alias_generators import to_camel

from nanoleaf_api.nanoleaf_errors import NanoleafDecodeError

# counts, ids and range bounds are unsigned on the device
UnsignedInt = conint(strict=True, ge=0)


class NanoleafState(Enum):
    ON = True
    OFF = False


class EffectsCommand(Enum):
    """Commands understood by the effects 'write' endpoint."""

    ADD = "add"
    DELETE = "delete"
    REQUEST = "request"
    REQUEST_ALL = "requestAll"
    REQUEST_PLUGINS = "requestPlugins"
    DISPLAY = "display"
    DISPLAY_TEMP = "displayTemp"


class NanoleafModel(BaseModel):
    """Immutable value read from the device, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Authorization(NanoleafModel):
    """Token issued when pairing."""

    auth_token: StrictStr = Field(alias="auth_token", min_length=1)


class On(NanoleafModel):
    value: StrictBool


class Range(NanoleafModel):
    """A bounded setting, min <= value <= max is enforced by the device."""

    max: UnsignedInt
    min: UnsignedInt
    value: UnsignedInt


class State(NanoleafModel):
    color_mode: StrictStr  # "effect", "hs" or "ct"
    brightness: Range
    ct: Range
    hue: Range
    sat: Range
    on: On


class Effects(NanoleafModel):
    effects_list: List[StrictStr]  # names of all installed effects
    select: StrictStr  # currently active effect


class Position(NanoleafModel):
    panel_id: UnsignedInt
    o: StrictInt  # orientation in degrees
    x: StrictInt
    y: StrictInt
    shape_type: Optional[StrictInt] = None  # not reported by older firmware


class Layout(NanoleafModel):
    num_panels: UnsignedInt
    side_length: UnsignedInt
    position_data: List[Position]


class PanelLayout(NanoleafModel):
    global_orientation: Range
    layout: Layout


class Rhythm(NanoleafModel):
    """Rhythm module, every field is null while no module is attached."""

    aux_available: Optional[StrictBool] = None
    firmware_version: Optional[StrictStr] = None
    hardware_version: Optional[StrictStr] = None
    rhythm_active: Optional[StrictBool] = None
    rhythm_connected: Optional[StrictBool] = None
    rhythm_id: Optional[StrictInt] = None
    rhythm_mode: Optional[StrictInt] = None
    rhythm_pos: Optional[Dict[str, Any]] = None


class PanelInfo(NanoleafModel):
    """Full device descriptor returned for a token."""

    name: StrictStr
    manufacturer: StrictStr
    model: StrictStr
    firmware_version: StrictStr
    serial_no: StrictStr
    state: State
    effects: Effects
    panel_layout: PanelLayout
    hardware_version: Optional[StrictStr] = None
    rhythm: Optional[Rhythm] = None


class PaletteColor(NanoleafModel):
    hue: StrictInt
    saturation: StrictInt
    brightness: StrictInt
    probability: Optional[float] = None


class PluginOption(NanoleafModel):
    name: StrictStr
    value: Any


class Effect(NanoleafModel):
    """One effect with its palette and, for plugin effects, the plugin setup."""

    anim_name: StrictStr
    anim_type: StrictStr  # "plugin", "static", "custom", ...
    palette: List[PaletteColor] = Field(default_factory=list)
    color_type: Optional[StrictStr] = None
    version: Optional[StrictStr] = None
    anim_data: Optional[StrictStr] = None
    loop: Optional[StrictBool] = None
    plugin_type: Optional[StrictStr] = None
    plugin_uuid: Optional[StrictStr] = None
    plugin_options: Optional[List[PluginOption]] = None


class Animations(NanoleafModel):
    animations: List[Effect]


class Plugin(NanoleafModel):
    uuid: StrictStr
    name: StrictStr
    description: StrictStr
    type: StrictStr
    plugin_options: Optional[List[Dict[str, Any]]] = None


class Plugins(NanoleafModel):
    plugins: List[Plugin]


# write payloads for brightness, hue, saturation and color temperature.
# the wire format has no tag, see encode_setting / decode_brightness.


@dataclass(frozen=True)
class SetValue(object):
    value: int


@dataclass(frozen=True)
class SetValueWithDuration(object):
    value: int
    duration: int  # seconds


@dataclass(frozen=True)
class Increment(object):
    increment: int  # signed, relative to the current value


Brightness = Union[Increment, SetValue, SetValueWithDuration]
SetRange = Union[Increment, SetValue]


def encode_setting(setting: Union[Brightness, SetRange]) -> Dict[str, int]:
    """Flatten a setting variant to its untagged wire shape.

    SetValue -> {"value": v}
    SetValueWithDuration -> {"value": v, "duration": d}
    Increment -> {"increment": n}
    """
    if isinstance(setting, Increment):
        return {"increment": setting.increment}
    if isinstance(setting, SetValueWithDuration):
        return {"value": setting.value, "duration": setting.duration}
    if isinstance(setting, SetValue):
        return {"value": setting.value}
    raise TypeError(f"Unsupported setting {setting!r}")


def _is_int(val: Any) -> bool:
    return isinstance(val, int) and not isinstance(val, bool)


def _decode_setting(data: Any, allow_duration: bool) -> Union[Brightness, SetRange]:
    """Pick the setting variant by the fields present in data."""
    if _is_int(data):
        return Increment(data)
    if not isinstance(data, dict):
        raise NanoleafDecodeError(TypeError(f"Expected object or integer, got {data!r}"))
    keys = set(data)
    if keys == {"increment"} and _is_int(data["increment"]):
        return Increment(data["increment"])
    if (
        allow_duration
        and keys == {"value", "duration"}
        and _is_int(data["value"])
        and _is_int(data["duration"])
    ):
        return SetValueWithDuration(data["value"], data["duration"])
    if keys == {"value"} and _is_int(data["value"]):
        return SetValue(data["value"])
    raise NanoleafDecodeError(ValueError(f"Ambiguous or unknown setting {data!r}"))


def decode_brightness(data: Any) -> Brightness:
    return _decode_setting(data, allow_duration=True)


def decode_set_range(data: Any) -> SetRange:
    return _decode_setting(data, allow_duration=False)


def encode_effect(effect: Effect) -> Dict[str, Any]:
    """Effect as camelCase dict, plugin fields only for plugin effects."""
    data = effect.model_dump(by_alias=True, exclude_none=True)
    if effect.plugin_type is None:
        data.pop("pluginUuid", None)
        data.pop("pluginOptions", None)
    return data


def from_json(data_class: Any, data: Any) -> Any:
    """Decode parsed json into data_class.

    data_class is one of the models above, str or List[str].
    Raises NanoleafDecodeError on any mismatch.
    """
    try:
        if isinstance(data_class, type) and issubclass(data_class, BaseModel):
            return data_class.model_validate(data)
        return TypeAdapter(data_class).validate_python(data, strict=True)
    except ValidationError as ex:
        raise NanoleafDecodeError(ex) from ex
