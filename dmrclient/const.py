HTTP_TIMEOUT = 10

AVTRANSPORT = "AVTransport"
RENDERING_CONTROL = "RenderingControl"
CONNECTION_MANAGER = "ConnectionManager"

# Single-instance renderers only
INSTANCE_ID = "0"
MASTER_CHANNEL = "Master"
PLAY_SPEED = "1"
SEEK_UNIT_REL_TIME = "REL_TIME"

DEFAULT_CONTENT_TYPE = "video/mpeg"
DEFAULT_DLNA_FEATURES = "*"
PROTOCOL_INFO_FORMAT = "http-get:*:{content_type}:{dlna_features}"

NS_DIDL_LITE = "urn:schemas-upnp-org:metadata-1-0/DIDL-Lite/"
NS_DC = "http://purl.org/dc/elements/1.1/"
NS_UPNP = "urn:schemas-upnp-org:metadata-1-0/upnp/"
NS_SEC = "http://www.sec.co.kr/"

DIDL_NSMAP = {
    None: NS_DIDL_LITE,
    "dc": NS_DC,
    "upnp": NS_UPNP,
    "sec": NS_SEC,
}

NS_SOAP_ENV = "http://schemas.xmlsoap.org/soap/envelope/"
NS_SOAP_ENC = "http://schemas.xmlsoap.org/soap/encoding/"
