"""Compute the next release version

Several releases may be cut on the same day. They share the major
(today's day index) and get increasing minors. The first release on a
new day starts again at minor 0.

:copyright: Copyright (c) 2014 CoreOS, Inc.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from coreos import version
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdc, pkdlog


class ReleaseError(ValueError):
    """Release configuration is invalid"""

    pass


def next_version(today_major, current, major=None, minor=None, patch=None):
    """Version following `current` for a release made today

    Args:
        today_major (int): day index of today
        current (Version): last recorded version
        major (int): overrides `today_major` [None]
        minor (int): overrides computed minor [None]
        patch (int): overrides patch [0]

    Returns:
        Version: next version
    """
    m = today_major if major is None else major
    if minor is None:
        minor = current.minor + 1 if current.major == m else 0
    return version.Version(
        m,
        minor,
        0 if patch is None else patch,
    )


def plan(
    codec, current, sdk_version=None, major=None, minor=None, patch=None, build_id=None
):
    """Compute the release to be made from `current`

    The SDK defaults to `current` since that is what the new release
    is built with. A release cannot be its own SDK.

    Args:
        codec (DateCodec): supplies today's day index
        current (Version): last recorded version
        sdk_version (str): SDK the release is built with [str(current)]
        major (int): see `next_version`
        minor (int): see `next_version`
        patch (int): see `next_version`
        build_id (str): CI build identifier [None]

    Returns:
        PKDict: version, sdk_version, build_id, branch, and tag

    Raises:
        ReleaseError: new major is negative or sdk_version is the same as the new version
    """
    t = codec.encode()
    v = next_version(t, current, major=major, minor=minor, patch=patch)
    pkdc("today={} current={} next={}", t, str(current), str(v))
    if v.major < 0:
        raise ReleaseError(
            "major={} is before the epoch; version must not be negative".format(v.major),
        )
    s = str(current) if sdk_version is None else str(sdk_version)
    if s == str(v):
        raise ReleaseError(
            "sdk_version={} is the same as the new version; a release may not be its own SDK".format(
                s
            ),
        )
    rv = PKDict(
        version=v,
        sdk_version=s,
        build_id=build_id or "",
        branch=v.branch,
        tag=v.tag,
    )
    pkdlog("version={} branch={} tag={} sdk_version={}", str(v), rv.branch, rv.tag, s)
    return rv
