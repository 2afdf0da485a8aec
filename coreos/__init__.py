"""coreos package

Configuration is declared here so that the environment keys are
``COREOS_EPOCH`` and ``COREOS_VERSION``.

:copyright: Copyright (c) 2014 CoreOS, Inc.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

import importlib.metadata
import os

try:
    __version__ = importlib.metadata.version("coreos")
except importlib.metadata.PackageNotFoundError:
    # We only have a version once the package is installed.
    pass

#: Time zone used when $TZ is not set
DEFAULT_TZ = "UTC"

_cfg = None


def cfg():
    """Configuration for the coreos package, parsed on first call

    Returns:
        PKDict: epoch (int) and version (str or None)
    """
    from pykern import pkconfig

    global _cfg

    if not _cfg:
        c = pkconfig.init(
            epoch=pkconfig.Required(
                int, "reference time in seconds since the Unix epoch"
            ),
            version=(None, str, "current version, default input to core_date"),
        )
        if c.epoch is None:
            pkconfig.raise_error("COREOS_EPOCH must be set to an integer")
        _cfg = c
    return _cfg


def codec(clock=None):
    """Create a `coreos.date_codec.DateCodec` from the configuration

    $TZ is a POSIX variable so it is read directly from the environment.

    Args:
        clock (callable): returns current time in seconds [date_codec.now]

    Returns:
        DateCodec: configured codec
    """
    from coreos import date_codec

    return date_codec.DateCodec(
        cfg().epoch,
        tz=os.environ.get("TZ") or DEFAULT_TZ,
        clock=clock,
    )
