"""
Decoders turning raw action response bodies into Python values.

Every decoder takes the SOAP envelope exactly as returned by the transport
and raises ParseError, with the body attached, when the expected output
argument is missing or unusable. No default values are ever substituted.
"""
import re

from lxml import etree

from .errors import ParseError
from .marshal import marshal_bool, parse_time
from .models import TransportState
from .util import XML_PARSER, _localname

# Commas always separate entries. Semicolons also appear inside DLNA feature
# strings, so they only separate entries when a new protocol-info follows.
PROTOCOL_LIST_SEPARATOR = re.compile(r",|;(?=[^:,;]+:[^:,;]*:[^:,;]*:)")

UNSIGNED_INT = re.compile(r"^[0-9]+$")


def response_arguments(body):
    """
    Return a dict of the output arguments found in the `*Response` element of
    a SOAP response body, keyed by local name.
    """
    raw = body.encode("utf-8") if isinstance(body, str) else body
    try:
        root = etree.fromstring(raw.strip(), parser=XML_PARSER)
    except (etree.XMLSyntaxError, ValueError, AttributeError) as exc:
        raise ParseError("Response is not well-formed XML: %s" % exc, body=body)

    for node in root.iter(etree.Element):
        if _localname(node).lower().endswith("response"):
            return {_localname(arg): arg.text or "" for arg in node.iterchildren(etree.Element)}
    raise ParseError("Response contains no action response element", body=body)


def response_argument(body, name):
    args = response_arguments(body)
    try:
        return args[name]
    except KeyError:
        raise ParseError("Response has no %r argument" % name, body=body)


def parse_volume(body):
    """
    CurrentVolume of a GetVolume response. Values outside 0-100 are returned
    as reported, anything that doesn't fit an unsigned byte is an error.
    """
    value = response_argument(body, "CurrentVolume").strip()
    if not UNSIGNED_INT.match(value):
        raise ParseError("CurrentVolume %r is not an integer" % value, body=body)
    volume = int(value)
    if volume > 255:
        raise ParseError("CurrentVolume %r is out of range" % value, body=body)
    return volume


def parse_supported_protocols(body):
    """
    Sink protocol-info list of a GetProtocolInfo response, in the order the
    device reports it.
    """
    value = response_argument(body, "Sink")
    return [
        entry.strip()
        for entry in PROTOCOL_LIST_SEPARATOR.split(value)
        if entry.strip()
    ]


def _parse_time_argument(body, name):
    value = response_argument(body, name)
    try:
        return parse_time(value)
    except ValueError as exc:
        raise ParseError("%s: %s" % (name, exc), body=body)


def parse_position(body):
    return _parse_time_argument(body, "RelTime")


def parse_duration(body):
    return _parse_time_argument(body, "MediaDuration")


def parse_transport_state(body):
    value = response_argument(body, "CurrentTransportState").strip()
    try:
        return TransportState(value)
    except ValueError:
        raise ParseError("Unknown transport state %r" % value, body=body)


def parse_mute(body):
    value = response_argument(body, "CurrentMute")
    try:
        return marshal_bool(value)
    except ValueError as exc:
        raise ParseError(str(exc), body=body)
