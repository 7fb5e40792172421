from .const import AVTRANSPORT


class RendererError(Exception):
    """
    Base class for every error raised by this package. `operation` is set by
    the renderer client to the name of the operation that failed.
    """

    operation = None

    def __str__(self):
        msg = super(RendererError, self).__str__()
        if self.operation is not None:
            return "%s: %s" % (self.operation, msg)
        return msg


class TransportError(RendererError):
    """
    The action could not be completed by the device: connection failure,
    HTTP error or SOAP fault. `error_code` and `error_description` are set when
    the device answered with a UPnPError fault.
    """

    def __init__(self, message, error_code=None, error_description=None):
        super(TransportError, self).__init__(message)
        self.error_code = error_code
        self.error_description = error_description


class UnknownServiceError(TransportError):
    """
    The device description does not list the requested service.
    """

    pass


class EncodingError(RendererError):
    """
    Media metadata could not be serialized into DIDL-Lite.
    """

    pass


class ParseError(RendererError):
    """
    An action response did not have the expected shape. The raw response is
    kept in `body`.
    """

    def __init__(self, message, body=None):
        super(ParseError, self).__init__(message)
        self.body = body


class UPnPErrorCodeDescriptions(object):
    _descriptions = {
        401: "No action by that name at this service.",
        402: (
            "Could be any of the following: not enough in args, args in the wrong order, one or "
            "more in args are of the wrong data type."
        ),
        403: "(deprecated - do not use)",
        501: "May be returned if current state of service prevents invoking that action.",
        600: "The argument value is invalid",
        601: (
            "An argument value is less than the minimum or more than the maximum value of the "
            "allowed value range, or is not in the allowed value list."
        ),
        602: "The requested action is optional and is not implemented by the device.",
        603: (
            "The device does not have sufficient memory available to complete the action. This "
            "MAY be a temporary condition; the control point MAY choose to retry the unmodified "
            "request again later and it MAY succeed if memory is available."
        ),
        604: (
            "The device has encountered an error condition which it cannot resolve itself and "
            "required human intervention such as a reset or power cycle. See the device display "
            "or documentation for further guidance."
        ),
        605: "A string argument is too long for the device to handle properly.",
    }

    def __getitem__(self, key):
        if not isinstance(key, int):
            raise KeyError("'key' must be an integer")
        if 606 <= key <= 612:
            return "These ErrorCodes are reserved for UPnP DeviceSecurity."
        elif 613 <= key <= 699:
            return "Common action errors. Defined by UPnP Forum Technical Committee."
        elif 700 <= key <= 799:
            return "Action-specific errors defined by UPnP Forum working committee."
        elif 800 <= key <= 899:
            return "Action-specific errors for non-standard actions. Defined by UPnP vendor."
        return self._descriptions[key]

    def get(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            return default


ERR_CODE_DESCRIPTIONS = UPnPErrorCodeDescriptions()

AVTRANSPORT_ERR_CODE_DESCRIPTIONS = {
    701: "Transition not available",
    702: "No contents",
    703: "Read error",
    704: "Format not supported for playback",
    705: "Transport is locked",
    706: "Write error",
    707: "Media is protected or not writable",
    708: "Format not supported for recording",
    709: "Media is full",
    710: "Seek mode not supported",
    711: "Illegal seek target",
    712: "Play mode not supported",
    713: "Record quality not supported",
    714: "Illegal MIME-type",
    715: "Content 'BUSY'",
    716: "Resource not found",
    717: "Play speed not supported",
    718: "Invalid InstanceID",
    719: "DRM error",
    720: "Expired content",
}


def describe_error_code(code, service=None):
    """
    Return the best known description for a UPnP error code, preferring the
    AVTransport-specific table when the error came from that service.
    """
    if service == AVTRANSPORT and code in AVTRANSPORT_ERR_CODE_DESCRIPTIONS:
        return AVTRANSPORT_ERR_CODE_DESCRIPTIONS[code]
    return ERR_CODE_DESCRIPTIONS.get(code)
