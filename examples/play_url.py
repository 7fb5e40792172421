#!/usr/bin/env python
#
# Show how to play a URL on a media renderer.
#
# Usage: play_url.py <device description URL> <media URL> [content type]
#

import sys
import time

import dmrclient

location, url = sys.argv[1:3]
content_type = sys.argv[3] if len(sys.argv) > 3 else "audio/mpeg"

# Read the renderer's device description. Its AVTransport, RenderingControl
# and ConnectionManager services are then reachable by name.
device = dmrclient.DeviceClient(location)
renderer = dmrclient.MediaRendererClient(device)

# Check the renderer claims to accept the content type before sending it.
protocols = renderer.get_supported_protocols()
if not any(p.split(":")[2] in (content_type, "*") for p in protocols if p.count(":") >= 3):
    print("%s doesn't list %s as supported, trying anyway" % (device.friendly_name, content_type))

renderer.load(
    url,
    content_type=content_type,
    metadata=dmrclient.Metadata(title=url.rsplit("/", 1)[-1]),
    autoplay=True,
)

try:
    while True:
        time.sleep(1)
        print("%s %s / %s (volume %d)" % (
            renderer.get_transport_state().value,
            dmrclient.format_time(renderer.get_position()),
            dmrclient.format_time(renderer.get_duration()),
            renderer.get_volume(),
        ))
except KeyboardInterrupt:
    renderer.stop()
