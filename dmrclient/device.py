import asyncio
from functools import partial

import aiohttp
import requests
from lxml import etree
from requests.compat import urljoin

from .const import HTTP_TIMEOUT
from .errors import TransportError, UnknownServiceError
from .soap import SOAP
from .util import XML_PARSER, _getLogger


class Service(object):
    """
    A service listed in a device description. Only what is needed to call
    actions on it is kept.
    """

    def __init__(self, url_base, service_type, service_id, control_url):
        self._url_base = url_base
        self.service_type = service_type
        self.service_id = service_id
        self.control_url = urljoin(self._url_base, control_url)

    def __repr__(self):
        return "<Service service_id='%s'>" % (self.service_id)

    @property
    def name(self):
        try:
            return self.service_id[self.service_id.rindex(":") + 1:]
        except ValueError:
            return self.service_id


class BaseDeviceClient(object):
    """
    UPnP device description reader and action transport.

    `location` is the URL of the device description, as found in the
    'Location' header during discovery. Services are addressed by the last
    segment of their serviceId, e.g. 'AVTransport' for
    'urn:upnp-org:serviceId:AVTransport'.
    """

    def __init__(self, location, device_name=None, ignore_urlbase=False, http_auth=None,
                 http_headers=None, timeout=HTTP_TIMEOUT):
        self.location = location
        self.device_name = location if device_name is None else device_name
        self.services = []
        self.service_map = {}
        self.http_auth = http_auth
        self.http_headers = http_headers
        self.timeout = timeout
        self._ignore_urlbase = ignore_urlbase
        self._log = _getLogger("Device")

        self.device_type = None
        self.friendly_name = None
        self.manufacturer = None
        self.model_name = None
        self.udn = None
        self._url_base = None

    def __repr__(self):
        return "<%s '%s'>" % (self.__class__.__name__, self.friendly_name or self.device_name)

    def __getitem__(self, key):
        return self.service_map[key]

    def _read_description(self, data):
        try:
            root = etree.fromstring(data, parser=XML_PARSER)
        except etree.XMLSyntaxError as exc:
            raise TransportError(
                "Invalid device description at %s: %s" % (self.location, exc)
            )
        findtext = partial(root.findtext, namespaces=root.nsmap, default="")

        self.device_type = findtext("device/deviceType").strip()
        self.friendly_name = findtext("device/friendlyName").strip()
        self.manufacturer = findtext("device/manufacturer").strip()
        self.model_name = findtext("device/modelName").strip()
        self.udn = findtext("device/UDN").strip()

        self._url_base = findtext("URLBase").strip()
        if self._url_base == "" or self._ignore_urlbase:
            # If no URL Base is given, the UPnP specification says: "the base
            # URL is the URL from which the device description was retrieved"
            self._url_base = self.location

        self.services = []
        self.service_map = {}
        # The double slash in the XPath is deliberate, as services can be
        # listed in two places (Section 2.3 of uPNP device architecture v1.1)
        for node in root.findall("device//serviceList/service", namespaces=root.nsmap):
            node_findtext = partial(node.findtext, namespaces=root.nsmap, default="")
            svc = Service(
                self._url_base,
                node_findtext("serviceType").strip(),
                node_findtext("serviceId").strip(),
                node_findtext("controlURL").strip(),
            )
            self._log.debug(
                "%s: Service %r at %r", self.device_name, svc.name, svc.control_url
            )
            self.services.append(svc)
            self.service_map.setdefault(svc.name, svc)

    def find_service(self, name):
        try:
            return self.service_map[name]
        except KeyError:
            raise UnknownServiceError(
                "%s has no service named %r" % (self.device_name, name)
            )

    def _soap(self, service_name, session=None):
        svc = self.find_service(service_name)
        return SOAP(svc.control_url, svc.service_type, service_name=svc.name, session=session)


class DeviceClient(BaseDeviceClient):
    """
    Blocking transport backed by requests. The device description is read
    when the instance is created.

    >>> device = DeviceClient('http://192.168.1.20:49152/description.xml')
    >>> device.call_action('RenderingControl', 'GetVolume',
    ...                    {'InstanceID': '0', 'Channel': 'Master'})
    b'<s:Envelope ...><u:GetVolumeResponse ...>...'
    """

    def __init__(self, location, **kwargs):
        super(DeviceClient, self).__init__(location, **kwargs)
        self._read_description(self._get_device_description())

    def _get_device_description(self):
        try:
            resp = requests.get(
                self.location,
                timeout=self.timeout,
                auth=self.http_auth,
                headers=self.http_headers,
            )
            resp.raise_for_status()
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                "Unable to read device description at %s: %s" % (self.location, exc)
            )
        return resp.content

    def call_action(self, service, action, params):
        soap = self._soap(service)
        self._log.debug(">> %s.%s (%s)", service, action, params)
        body = soap.call(action, params, self.http_auth, self.http_headers, self.timeout)
        self._log.debug("<< %s.%s: %s", service, action, body)
        return body


class AsyncDeviceClient(BaseDeviceClient):
    """
    asyncio transport backed by aiohttp. Call `async_init()` before use and
    `close()` when done; a session passed in by the caller is left open.
    """

    def __init__(self, location, session=None, **kwargs):
        super(AsyncDeviceClient, self).__init__(location, **kwargs)
        self.session = session
        self._owns_session = session is None
        if self.http_auth is not None:
            self.http_auth = aiohttp.BasicAuth(*self.http_auth)

    async def async_init(self):
        """
        Asynchronously retrieve the device description and read its services.
        """
        if self.session is None:
            self.session = aiohttp.ClientSession()
        try:
            async with self.session.get(
                self.location,
                auth=self.http_auth,
                headers=self.http_headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as resp:
                resp.raise_for_status()
                data = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(
                "Unable to read device description at %s: %s" % (self.location, exc)
            )
        self._read_description(data)
        return self

    async def call_action(self, service, action, params):
        if self.session is None:
            raise TransportError(
                "%s is not connected, call async_init() first" % self.device_name
            )
        soap = self._soap(service, session=self.session)
        self._log.debug(">> %s.%s (%s)", service, action, params)
        body = await soap.async_call(
            action, params, self.http_auth, self.http_headers, self.timeout
        )
        self._log.debug("<< %s.%s: %s", service, action, body)
        return body

    async def close(self):
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None
