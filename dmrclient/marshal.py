import re

# H+:MM:SS with an optional fraction, either decimal (.500) or F0/F1 (.1/3)
TIME_PATTERN = re.compile(r"^\s*\+?(\d+):([0-5]?\d):([0-5]?\d)(?:\.\d+(?:/\d+)?)?\s*$")


def format_time(seconds):
    """
    Render a number of seconds as the H+:MM:SS string used by Seek targets.
    Hours are zero-padded to two digits and never wrap.

    >>> format_time(7384)
    '02:03:04'
    """
    seconds = int(seconds)
    if seconds < 0:
        raise ValueError("Time value must not be negative, got %d" % seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return "%02d:%02d:%02d" % (hours, minutes, seconds)


def parse_time(value):
    """
    Parse a UPnP time string into whole seconds, dropping any fraction.
    Raises ValueError if the value isn't a time string.
    """
    match = TIME_PATTERN.match(value or "")
    if match is None:
        raise ValueError("%r is not a valid UPnP time value" % value)
    hours, minutes, seconds = (int(x) for x in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def marshal_bool(value):
    """
    Parse a UPnP 'boolean' value. Raises ValueError if it isn't one.
    """
    lowered = (value or "").strip().lower()
    if lowered in ("1", "true", "yes"):
        return True
    if lowered in ("0", "false", "no"):
        return False
    raise ValueError("%r is not a valid UPnP boolean value" % value)
