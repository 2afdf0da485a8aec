"""Convert between CoreOS versions and build dates

Decode is the default mode. It prints the date a version was built::

    $ COREOS_EPOCH=1372636800 coreos core_date v367.0.0
    Thu Jul 03 00:00:00 UTC 2014
    $ coreos core_date decode 367 +%Y-%m-%d
    2014-07-03

Encode prints the day index of now or of the given date::

    $ coreos core_date encode 2014-07-03
    367

Configured by ``$COREOS_EPOCH``, ``$COREOS_VERSION`` (the default
version to decode) and ``$TZ``.

:copyright: Copyright (c) 2014 CoreOS, Inc.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkcli
from pykern.pkdebug import pkdc
import coreos
import coreos.date_codec
import coreos.version

_DECODE = "decode"

_ENCODE = "encode"

#: date(1) style format argument
_FORMAT_PREFIX = "+"


def default_command(*args):
    """Decode a version to a date, or encode a date to a day index

    ``[decode] [version] [+FORMAT]``: version defaults to
    ``$COREOS_VERSION``; an empty version also uses the default.

    ``encode [DATE...]``: DATE words are joined and parsed; defaults
    to now. ``@<seconds>`` is a literal Unix time.

    Args:
        args (str): mode and arguments as above

    Returns:
        str: formatted date or day index
    """
    a = list(args)
    if a and a[0] == _ENCODE:
        return _encode(a[1:])
    if a and a[0] == _DECODE:
        a.pop(0)
    return _decode(a)


def _decode(args):
    v = None
    if args and not args[0].startswith(_FORMAT_PREFIX):
        v = args.pop(0)
    if not v:
        v = coreos.cfg().version
        if not v:
            pkcli.command_error("no version argument and $COREOS_VERSION is not set")
    if len(args) > 1:
        pkcli.command_error("{}: too many arguments", " ".join(args))
    f = None
    if args:
        f = args[0][len(_FORMAT_PREFIX) :]
    try:
        d = coreos.version.parse_day_index(v)
    except coreos.version.VersionError as e:
        pkcli.command_error("{}", e)
    c = _codec()
    t = c.decode(d)
    pkdc("version={} day_index={} timestamp={}", v, d, t)
    try:
        return c.format(t, f)
    except coreos.date_codec.DateCodecError as e:
        pkcli.command_error("{}: {}", v, e)


def _codec():
    try:
        return coreos.codec()
    except coreos.date_codec.DateCodecError as e:
        pkcli.command_error("{}", e)


def _encode(args):
    c = _codec()
    t = None
    if args:
        try:
            t = c.parse_date(" ".join(args))
        except coreos.date_codec.DateCodecError as e:
            pkcli.command_error("{}", e)
    return str(c.encode(t))
