# Copyright (c) 2012-2016, Ferry Boender <ferry.boender@gmail.com>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
This module provides a control point (client) for UPnP/DLNA MediaRenderer
devices. It drives the AVTransport and RenderingControl services of a renderer
and queries its ConnectionManager.

The usual flow for working with a renderer is:

- Connect to the device.

  A DeviceClient (or AsyncDeviceClient) reads the device description found at
  the URL returned by discovery and maps each of its services by name. It acts
  as the transport: `call_action(service, action, params)` sends one SOAP
  request and returns the raw response body. Discovery itself is left to other
  tools.

- Drive the renderer.

  A MediaRendererClient (or AsyncMediaRendererClient) wraps any transport and
  exposes the renderer operations: load, play, pause, stop, seek, get_volume,
  set_volume, get_mute, set_mute, get_supported_protocols, get_position,
  get_duration and get_transport_state. Loading a URL sends a DIDL-Lite
  document describing it along with the URI.

The client keeps no state between calls, doesn't retry and doesn't check that
a device offers an action before calling it. Errors are raised as
TransportError, EncodingError or ParseError, each tagged with the operation
that failed.

The following example plays a file on a renderer and prints its position:

------------------------------------------------------------------------------
import asyncio
import dmrclient

async def main():
    device = dmrclient.AsyncDeviceClient('http://192.168.1.20:49152/description.xml')
    await device.async_init()
    renderer = dmrclient.AsyncMediaRendererClient(device)
    await renderer.load(
        'http://192.168.1.2:8000/song.mp3',
        content_type='audio/mpeg',
        metadata=dmrclient.Metadata(title='Song', artist='Artist'),
        autoplay=True,
    )
    print(await renderer.get_position())
    await device.close()

asyncio.run(main())
------------------------------------------------------------------------------

Useful Links:

* http://upnp.org/specs/av/UPnP-av-AVTransport-v1-Service.pdf
* http://upnp.org/specs/av/UPnP-av-RenderingControl-v1-Service.pdf
"""
from dmrclient import actions, const, decode, didl, errors, marshal, soap, util  # noqa: F401
from .client import AsyncMediaRendererClient, MediaRendererClient
from .device import AsyncDeviceClient, DeviceClient
from .errors import EncodingError, ParseError, RendererError, TransportError, UnknownServiceError
from .marshal import format_time
from .models import LoadOptions, MediaItem, Metadata, ObjectClass, TransportState

__all__ = [
    "MediaRendererClient", "AsyncMediaRendererClient", "DeviceClient", "AsyncDeviceClient",
    "RendererError", "TransportError", "UnknownServiceError", "EncodingError", "ParseError",
    "LoadOptions", "MediaItem", "Metadata", "ObjectClass", "TransportState", "format_time",
]
