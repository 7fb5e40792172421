from contextlib import contextmanager

from .actions import find_operation
from .errors import RendererError
from .models import LoadOptions
from .util import _getLogger


@contextmanager
def _operation(name):
    """
    Tag any RendererError raised in the block with the operation name, unless
    a nested operation already claimed it.
    """
    try:
        yield
    except RendererError as exc:
        if exc.operation is None:
            exc.operation = name
        raise


class BaseRendererClient(object):
    """
    Shared plumbing for the blocking and asyncio renderer clients.

    `transport` is any object providing
    `call_action(service, action, params)` which returns the raw response body
    of the action and raises on failure. The client keeps no state between
    calls: the device is the only source of truth.
    """

    def __init__(self, transport):
        self.transport = transport
        self._log = _getLogger("MediaRendererClient")

    def __repr__(self):
        return "<%s transport=%r>" % (self.__class__.__name__, self.transport)

    def _prepare(self, name, *args):
        op = find_operation(name)
        params = op.build(*args)
        self._log.debug(">> %s.%s (%s)", op.service, op.action, dict(params))
        return op, params

    def _finish(self, op, body):
        self._log.debug("<< %s.%s: %s", op.service, op.action, body)
        if op.decode is None:
            return None
        return op.decode(body)

    @staticmethod
    def _load_options(options, kwargs):
        if options is None:
            return LoadOptions(**kwargs)
        if kwargs:
            raise TypeError("Pass either a LoadOptions instance or keyword options, not both")
        return options


class MediaRendererClient(BaseRendererClient):
    """
    Blocking client for a UPnP MediaRenderer.

    >>> device = DeviceClient('http://192.168.1.20:49152/description.xml')
    >>> renderer = MediaRendererClient(device)
    >>> renderer.load('http://192.168.1.2:8000/song.mp3', content_type='audio/mpeg',
    ...               metadata=Metadata('Song', 'Artist'), autoplay=True)
    >>> renderer.get_position()
    12
    """

    def _call(self, name, *args):
        with _operation(name):
            op, params = self._prepare(name, *args)
            body = self.transport.call_action(op.service, op.action, params)
            return self._finish(op, body)

    def load(self, url, options=None, **kwargs):
        """
        Set `url` as the renderer's current URI, described by a DIDL-Lite
        document built from `options` (a LoadOptions, or its fields as keyword
        arguments). With `autoplay`, Play follows once the URI was accepted.
        If that Play fails its error is raised with `operation == "play"` and
        the URI remains set on the device.
        """
        options = self._load_options(options, kwargs)
        self._call("load", url, options)
        if options.autoplay:
            self.play()

    def play(self):
        self._call("play")

    def pause(self):
        self._call("pause")

    def stop(self):
        self._call("stop")

    def seek(self, seconds):
        """
        Ask the renderer to seek to `seconds` from the start of the track.
        Returns once the device accepted the request, not when it got there.
        """
        self._call("seek", seconds)

    def get_volume(self):
        return self._call("get_volume")

    def set_volume(self, volume):
        self._call("set_volume", volume)

    def get_mute(self):
        return self._call("get_mute")

    def set_mute(self, mute):
        self._call("set_mute", mute)

    def get_supported_protocols(self):
        return self._call("get_supported_protocols")

    def get_position(self):
        return self._call("get_position")

    def get_duration(self):
        return self._call("get_duration")

    def get_transport_state(self):
        return self._call("get_transport_state")


class AsyncMediaRendererClient(BaseRendererClient):
    """
    asyncio client for a UPnP MediaRenderer. The transport's `call_action`
    must be a coroutine function. Every method awaits exactly one action,
    except `load` with autoplay, which awaits SetAVTransportURI before Play.
    """

    async def _call(self, name, *args):
        with _operation(name):
            op, params = self._prepare(name, *args)
            body = await self.transport.call_action(op.service, op.action, params)
            return self._finish(op, body)

    async def load(self, url, options=None, **kwargs):
        options = self._load_options(options, kwargs)
        await self._call("load", url, options)
        if options.autoplay:
            await self.play()

    async def play(self):
        await self._call("play")

    async def pause(self):
        await self._call("pause")

    async def stop(self):
        await self._call("stop")

    async def seek(self, seconds):
        await self._call("seek", seconds)

    async def get_volume(self):
        return await self._call("get_volume")

    async def set_volume(self, volume):
        await self._call("set_volume", volume)

    async def get_mute(self):
        return await self._call("get_mute")

    async def set_mute(self, mute):
        await self._call("set_mute", mute)

    async def get_supported_protocols(self):
        return await self._call("get_supported_protocols")

    async def get_position(self):
        return await self._call("get_position")

    async def get_duration(self):
        return await self._call("get_duration")

    async def get_transport_state(self):
        return await self._call("get_transport_state")
