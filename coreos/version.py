"""CoreOS version triples and the names derived from them

A version is ``major.minor.patch``. The major is the day index of the
build (see `coreos.date_codec`), the minor counts releases made on that
day, and the patch counts fixes to a release.

:copyright: Copyright (c) 2014 CoreOS, Inc.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

import collections
import re

#: Prefix of branches created for a major version
BRANCH_PREFIX = "build-"

#: Optional marker in front of a version string (tags are ``v1.2.3``)
TAG_PREFIX = "v"

#: A component is decimal digits, optionally negative (pre-epoch builds)
_INT_RE = re.compile(r"^-?\d+$")

#: Components must be non-negative in a full version
_COMPONENT_RE = re.compile(r"^\d+$")


class VersionError(ValueError):
    """Text could not be parsed as a version or day index"""

    pass


class Version(collections.namedtuple("Version", ("major", "minor", "patch"))):
    """Immutable version triple

    Attributes:
        major (int): day index of the build
        minor (int): release count on the day
        patch (int): fix count on the release
    """

    __slots__ = ()

    def __str__(self):
        return "{}.{}.{}".format(*self)

    @property
    def branch(self):
        """str: source control branch name ``build-<major>``"""
        return "{}{}".format(BRANCH_PREFIX, self.major)

    @property
    def tag(self):
        """str: source control tag name ``v<major>.<minor>.<patch>``"""
        return "{}{}".format(TAG_PREFIX, self)

    @classmethod
    def parse(cls, text):
        """Parse ``[v]major.minor.patch``

        Exactly three non-negative integer components are required.

        Args:
            text (str): version string

        Returns:
            Version: parsed triple

        Raises:
            VersionError: if not exactly three integer components
        """
        p = _strip_prefix(text).split(".")
        if len(p) != 3:
            raise VersionError(
                "{}: version must have three components (major.minor.patch)".format(
                    text
                ),
            )
        for x in p:
            if not _COMPONENT_RE.search(x):
                raise VersionError(
                    "{}: component={} is not a non-negative integer".format(text, x),
                )
        return cls(*(int(x) for x in p))


def build_id(branch, counter):
    """Identifier for a CI build

    Args:
        branch (str): name of the branch being built
        counter (int): build number from the CI system

    Returns:
        str: ``<branch>-<counter>``
    """
    if not branch:
        raise VersionError("branch must not be empty")
    c = parse_component(counter, "build counter")
    return "{}-{}".format(branch, c)


def parse_component(value, name="component"):
    """Parse a non-negative integer version component

    Args:
        value (object): int or str
        name (str): used in the error message

    Returns:
        int: value
    """
    if isinstance(value, bool):
        raise VersionError("{}={} must be an integer".format(name, value))
    if isinstance(value, int):
        if value < 0:
            raise VersionError("{}={} must not be negative".format(name, value))
        return value
    if isinstance(value, str) and _COMPONENT_RE.search(value.strip()):
        return int(value)
    raise VersionError("{}={} is not a non-negative integer".format(name, value))


def parse_day_index(text):
    """Extract the day index from a version-like string

    Strips one leading ``v`` then takes everything up to the first
    ``.``, so ``v123.5.0``, ``123.5`` and ``123`` are all day 123.

    Args:
        text (str): version or bare day index

    Returns:
        int: day index

    Raises:
        VersionError: if the major part is not an integer
    """
    if text is None:
        raise VersionError("no version supplied")
    m = _strip_prefix(text).split(".", 1)[0]
    if not _INT_RE.search(m):
        raise VersionError("{}: major={} is not an integer".format(text, m))
    return int(m)


def _strip_prefix(text):
    t = text.strip()
    if t.startswith(TAG_PREFIX):
        return t[len(TAG_PREFIX) :]
    return t
