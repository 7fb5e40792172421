import logging

from lxml import etree


def _getLogger(name):
    """
    Retrieve a logger instance. Handlers are left to the application, this
    package only ever emits records.
    """
    return logging.getLogger("dmrclient.%s" % name)


def _localname(node):
    """
    Return the tag of an lxml element without its namespace.
    """
    return etree.QName(node).localname


def _find_local(root, name):
    """
    Return the first descendant of `root` whose local tag name is `name`, or
    None. UPnP devices are inconsistent about namespacing output arguments so
    they are matched by local name only.
    """
    for node in root.iter(etree.Element):
        if _localname(node) == name:
            return node
    return None


# Device responses are untrusted: no entity expansion, no network access.
XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)
