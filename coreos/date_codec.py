"""Convert between calendar time and day indexes

A day index is the number of whole days since a fixed epoch
(``$COREOS_EPOCH``). It is the major component of a CoreOS version so
a version can be turned back into the date it was built.

Floor division is used throughout so times before the epoch map to
negative indexes, e.g. ``encode(epoch - 1, epoch) == -1``.

:copyright: Copyright (c) 2014 CoreOS, Inc.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern.pkdebug import pkdc
import datetime
import dateutil.parser
import math
import pytz
import re
import time

#: Length of a day index bucket
SECONDS_PER_DAY = 86400

#: Same as the default output of date(1)
DEFAULT_FORMAT = "%a %b %d %H:%M:%S %Z %Y"

#: ``@<seconds>`` is a literal Unix time as in ``date -d @1400000000``
_AT_SECONDS_RE = re.compile(r"^@(-?\d+)$")


class DateCodecError(ValueError):
    """Date expression or time zone could not be parsed"""

    pass


class DateCodec(object):
    """Codec bound to an epoch, time zone and clock

    Args:
        epoch (int): reference time in seconds since the Unix epoch
        tz (str): zone name used for parsing and formatting ["UTC"]
        clock (callable): returns current Unix time [now]

    Attributes:
        epoch (int): reference time
        tz (tzinfo): time zone
    """

    def __init__(self, epoch, tz="UTC", clock=None):
        if isinstance(epoch, bool) or not isinstance(epoch, int):
            raise DateCodecError("epoch={} must be an integer".format(epoch))
        self.epoch = epoch
        try:
            self.tz = pytz.timezone(tz)
        except pytz.UnknownTimeZoneError:
            raise DateCodecError("tz={} unknown time zone".format(tz))
        self._clock = clock or now

    def decode(self, day_index):
        """Timestamp at the start of `day_index`

        Args:
            day_index (int): days since epoch

        Returns:
            int: seconds since the Unix epoch
        """
        return decode(day_index, self.epoch)

    def encode(self, timestamp=None):
        """Day index containing `timestamp`

        Args:
            timestamp (int): seconds since the Unix epoch [clock()]

        Returns:
            int: days since epoch
        """
        if timestamp is None:
            timestamp = int(self._clock())
            pkdc("clock={}", timestamp)
        return encode(timestamp, self.epoch)

    def format(self, timestamp, fmt=None):
        """Format `timestamp` in the codec's time zone

        Args:
            timestamp (int): seconds since the Unix epoch
            fmt (str): strftime format [DEFAULT_FORMAT]

        Returns:
            str: formatted time
        """
        try:
            return datetime.datetime.fromtimestamp(timestamp, tz=self.tz).strftime(
                fmt or DEFAULT_FORMAT,
            )
        except (OverflowError, OSError, ValueError) as e:
            raise DateCodecError(
                "timestamp={} out of range; error={}".format(timestamp, e),
            )

    def parse_date(self, text):
        """Convert a date expression to seconds since the Unix epoch

        ``@<seconds>`` is taken literally. Anything else is parsed by
        `dateutil.parser`. Dates without a zone are in the codec's zone.

        Args:
            text (str): date expression

        Returns:
            int: seconds since the Unix epoch
        """
        t = text.strip()
        m = _AT_SECONDS_RE.search(t)
        if m:
            return int(m.group(1))
        try:
            d = dateutil.parser.parse(t)
        except (ValueError, OverflowError) as e:
            raise DateCodecError("{}: unable to parse date; error={}".format(text, e))
        if d.tzinfo is None:
            d = self.tz.localize(d)
        return math.floor(d.timestamp())


def decode(day_index, epoch):
    """Inverse of `encode` at day granularity

    Args:
        day_index (int): days since epoch
        epoch (int): reference time

    Returns:
        int: ``day_index * SECONDS_PER_DAY + epoch``
    """
    return day_index * SECONDS_PER_DAY + epoch


def encode(timestamp, epoch):
    """Whole days elapsed from `epoch` to `timestamp`

    Args:
        timestamp (int): seconds since the Unix epoch
        epoch (int): reference time

    Returns:
        int: ``floor((timestamp - epoch) / SECONDS_PER_DAY)``
    """
    return (timestamp - epoch) // SECONDS_PER_DAY


def now():
    """Current Unix time

    Returns:
        int: seconds since the Unix epoch
    """
    return int(time.time())
