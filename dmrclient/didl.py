"""
DIDL-Lite encoding of media items, used as the CurrentURIMetaData argument of
SetAVTransportURI.

Many renderers are strict about the shape of this document, so the namespace
declarations and the element set are fixed: one `item` holding `upnp:class`,
`res`, `dc:title` and `dc:artist`, in that order.
"""
from lxml import etree

from .const import DIDL_NSMAP, NS_DC, NS_DIDL_LITE, NS_UPNP
from .errors import EncodingError
from .models import ObjectClass


def _qname(namespace, tag):
    return "{%s}%s" % (namespace, tag)


def build_metadata(item, object_class=ObjectClass.AUDIO):
    """
    Return the DIDL-Lite document describing `item` (a `MediaItem`) as a
    string. Text and attribute values are escaped by lxml. Raises
    EncodingError if the values can't be represented in XML.
    """
    try:
        didl = etree.Element(_qname(NS_DIDL_LITE, "DIDL-Lite"), nsmap=DIDL_NSMAP)
        node = etree.SubElement(
            didl,
            _qname(NS_DIDL_LITE, "item"),
            attrib={"id": "0", "parentID": "-1", "restricted": "false"},
        )
        etree.SubElement(node, _qname(NS_UPNP, "class")).text = ObjectClass(object_class).value
        res = etree.SubElement(
            node, _qname(NS_DIDL_LITE, "res"), protocolInfo=item.protocol_info
        )
        res.text = item.url
        etree.SubElement(node, _qname(NS_DC, "title")).text = item.title
        etree.SubElement(node, _qname(NS_DC, "artist")).text = item.artist
        raw = etree.tostring(didl, xml_declaration=True, encoding="UTF-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError("Unable to encode metadata for %r: %s" % (item.url, exc))
    return raw.decode("utf-8")
