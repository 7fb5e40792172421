"""
Operations a media renderer client can perform.

Each operation maps to exactly one (service, action) pair, a builder producing
the action's input arguments and an optional decoder for its response. UPnP
arguments are text on the wire, so builders only ever return string values.
"""
from collections import OrderedDict, namedtuple

from . import decode
from .const import (
    AVTRANSPORT,
    CONNECTION_MANAGER,
    INSTANCE_ID,
    MASTER_CHANNEL,
    PLAY_SPEED,
    RENDERING_CONTROL,
    SEEK_UNIT_REL_TIME,
)
from .didl import build_metadata
from .marshal import format_time
from .models import LoadOptions

Operation = namedtuple("Operation", ["name", "service", "action", "build", "decode"])


def _params(*pairs):
    params = OrderedDict([("InstanceID", INSTANCE_ID)])
    params.update(pairs)
    return params


def build_load(url, options=None):
    options = options or LoadOptions()
    metadata = build_metadata(options.media_item(url), options.object_class)
    return _params(("CurrentURI", url), ("CurrentURIMetaData", metadata))


def build_play():
    return _params(("Speed", PLAY_SPEED))


def build_instance():
    return _params()


def build_seek(seconds):
    return _params(("Unit", SEEK_UNIT_REL_TIME), ("Target", format_time(seconds)))


def build_channel():
    return _params(("Channel", MASTER_CHANNEL))


def build_set_volume(volume):
    return _params(("Channel", MASTER_CHANNEL), ("DesiredVolume", str(int(volume))))


def build_set_mute(mute):
    return _params(("Channel", MASTER_CHANNEL), ("DesiredMute", "1" if mute else "0"))


OPERATIONS = OrderedDict(
    (op.name, op)
    for op in (
        Operation("load", AVTRANSPORT, "SetAVTransportURI", build_load, None),
        Operation("play", AVTRANSPORT, "Play", build_play, None),
        Operation("pause", AVTRANSPORT, "Pause", build_instance, None),
        Operation("stop", AVTRANSPORT, "Stop", build_instance, None),
        Operation("seek", AVTRANSPORT, "Seek", build_seek, None),
        Operation("get_volume", RENDERING_CONTROL, "GetVolume", build_channel, decode.parse_volume),
        Operation("set_volume", RENDERING_CONTROL, "SetVolume", build_set_volume, None),
        Operation(
            "get_supported_protocols",
            CONNECTION_MANAGER,
            "GetProtocolInfo",
            build_instance,
            decode.parse_supported_protocols,
        ),
        Operation("get_position", AVTRANSPORT, "GetPositionInfo", build_instance, decode.parse_position),
        Operation("get_duration", AVTRANSPORT, "GetMediaInfo", build_instance, decode.parse_duration),
        Operation(
            "get_transport_state",
            AVTRANSPORT,
            "GetTransportInfo",
            build_instance,
            decode.parse_transport_state,
        ),
        Operation("get_mute", RENDERING_CONTROL, "GetMute", build_channel, decode.parse_mute),
        Operation("set_mute", RENDERING_CONTROL, "SetMute", build_set_mute, None),
    )
)


def find_operation(name):
    try:
        return OPERATIONS[name]
    except KeyError:
        raise ValueError("Operation with name %r does not exist." % name)
