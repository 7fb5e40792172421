import asyncio

import aiohttp
import requests
from lxml import etree

from .const import HTTP_TIMEOUT, NS_SOAP_ENC, NS_SOAP_ENV
from .errors import TransportError, describe_error_code
from .util import XML_PARSER, _find_local, _getLogger


class SOAP(object):
    """SOAP (Simple Object Access Protocol) implementation
    This class defines a simple SOAP client for UPnP control URLs. Responses
    are handed back as the raw bytes received, decoding them (and honouring
    their XML encoding declaration) is left to the caller.
    """

    def __init__(self, url, service_type, service_name=None, session=None):
        self.url = url
        self.service_type = service_type
        self.service_name = service_name
        self.session = session
        self._host = self.url.split("//", 1)[1].split("/", 1)[0]  # Get hostname portion of url
        self._log = _getLogger("SOAP")

    def __repr__(self):
        return "<SOAP url='%s'>" % (self.url)

    def build_envelope(self, action_name, arg_in=None):
        """
        Return the request body for `action_name` as UTF-8 bytes. Argument
        values are escaped.
        """
        envelope = etree.Element(
            "{%s}Envelope" % NS_SOAP_ENV, nsmap={"s": NS_SOAP_ENV}
        )
        envelope.set("{%s}encodingStyle" % NS_SOAP_ENV, NS_SOAP_ENC)
        body = etree.SubElement(envelope, "{%s}Body" % NS_SOAP_ENV)
        action = etree.SubElement(
            body,
            "{%s}%s" % (self.service_type, action_name),
            nsmap={"u": self.service_type},
        )
        for name, value in (arg_in or {}).items():
            etree.SubElement(action, name).text = value
        return etree.tostring(envelope, xml_declaration=True, encoding="utf-8")

    def _headers(self, action_name, http_headers=None):
        headers = {
            "SOAPAction": '"%s#%s"' % (self.service_type, action_name),
            "Host": self._host,
            "Content-Type": 'text/xml; charset="utf-8"',
        }
        headers.update(http_headers or {})
        return headers

    def _raise_fault(self, action_name, status, content):
        """
        Raise a TransportError for a failed call, carrying the UPnP error code
        and description when the device sent a UPnPError fault.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        try:
            root = etree.fromstring(content.strip(), parser=XML_PARSER)
        except (etree.XMLSyntaxError, ValueError):
            root = None
        code_node = _find_local(root, "errorCode") if root is not None else None
        if code_node is None or not (code_node.text or "").strip().isdigit():
            raise TransportError(
                "%s failed with HTTP status %s" % (action_name, status)
            )

        code = int(code_node.text.strip())
        desc_node = _find_local(root, "errorDescription")
        if desc_node is not None and desc_node.text:
            desc = desc_node.text.strip()
        else:
            desc = describe_error_code(code, self.service_name)
        raise TransportError(
            "%s failed with UPnP error %d: %s" % (action_name, code, desc),
            error_code=code,
            error_description=desc,
        )

    def call(self, action_name, arg_in=None, http_auth=None, http_headers=None,
             timeout=HTTP_TIMEOUT):
        body = self.build_envelope(action_name, arg_in)
        headers = self._headers(action_name, http_headers)
        try:
            resp = requests.post(
                self.url, body, headers=headers, auth=http_auth, timeout=timeout
            )
            resp.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            response = exc.response
            self._raise_fault(
                action_name,
                getattr(response, "status_code", None),
                response.content if response is not None else b"",
            )
        except requests.exceptions.RequestException as exc:
            raise TransportError("%s failed: %s" % (action_name, exc))

        return resp.content

    async def async_call(self, action_name, arg_in=None, http_auth=None, http_headers=None,
                         timeout=HTTP_TIMEOUT):
        body = self.build_envelope(action_name, arg_in)
        headers = self._headers(action_name, http_headers)
        try:
            async with self.session.post(
                self.url,
                data=body,
                headers=headers,
                auth=http_auth,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as resp:
                content = await resp.read()
                if resp.status >= 400:
                    self._raise_fault(action_name, resp.status, content)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError("%s failed: %s" % (action_name, exc))
        return content
