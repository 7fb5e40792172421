from collections import namedtuple
from enum import Enum

from .const import DEFAULT_CONTENT_TYPE, DEFAULT_DLNA_FEATURES, PROTOCOL_INFO_FORMAT


class ObjectClass(Enum):
    """
    DIDL-Lite `upnp:class` values an item can be encoded as.
    """

    AUDIO = "object.item.audioItem"
    VIDEO = "object.item.videoItem"
    IMAGE = "object.item.imageItem"


class TransportState(Enum):
    STOPPED = "STOPPED"
    PLAYING = "PLAYING"
    TRANSITIONING = "TRANSITIONING"
    PAUSED_PLAYBACK = "PAUSED_PLAYBACK"
    PAUSED_RECORDING = "PAUSED_RECORDING"
    RECORDING = "RECORDING"
    NO_MEDIA_PRESENT = "NO_MEDIA_PRESENT"


Metadata = namedtuple("Metadata", ["title", "artist"])
Metadata.__new__.__defaults__ = ("", "")

MediaItem = namedtuple("MediaItem", ["url", "title", "artist", "protocol_info"])


class LoadOptions(object):
    """
    Options for loading a URL onto a renderer.

    `content_type` and `dlna_features` make up the third and fourth fields of
    the resource's protocol-info string. `metadata` is a `Metadata` (or any
    object with `title` and `artist`). When `autoplay` is set, Play is issued
    once the URI has been accepted by the device.
    """

    def __init__(
        self,
        dlna_features=None,
        content_type=None,
        metadata=None,
        autoplay=False,
        object_class=ObjectClass.AUDIO,
    ):
        self.dlna_features = dlna_features
        self.content_type = content_type
        self.metadata = metadata
        self.autoplay = autoplay
        self.object_class = object_class

    def __repr__(self):
        return "<LoadOptions content_type=%r dlna_features=%r autoplay=%r>" % (
            self.content_type,
            self.dlna_features,
            self.autoplay,
        )

    @property
    def protocol_info(self):
        return PROTOCOL_INFO_FORMAT.format(
            content_type=self.content_type or DEFAULT_CONTENT_TYPE,
            dlna_features=self.dlna_features or DEFAULT_DLNA_FEATURES,
        )

    def media_item(self, url):
        """
        Build the `MediaItem` describing `url` under these options.
        """
        metadata = self.metadata if self.metadata is not None else Metadata()
        return MediaItem(
            url=url,
            title=metadata.title or "",
            artist=metadata.artist or "",
            protocol_info=self.protocol_info,
        )
