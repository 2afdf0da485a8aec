"""Read and write the release version file

The file is a flat ``KEY=value`` list sourced by shell scripts::

    COREOS_BUILD=123
    COREOS_BRANCH=2
    COREOS_PATCH=0
    COREOS_VERSION=123.2.0+master-1234
    COREOS_VERSION_ID=123.2.0
    COREOS_BUILD_ID=master-1234
    COREOS_SDK_VERSION=123.1.0

:copyright: Copyright (c) 2014 CoreOS, Inc.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from coreos import version
from pykern import pkio
from pykern.pkcollections import PKDict
from pykern.pkdebug import pkdlog
import re

#: Keys in the order they are written
KEYS = (
    "COREOS_BUILD",
    "COREOS_BRANCH",
    "COREOS_PATCH",
    "COREOS_VERSION",
    "COREOS_VERSION_ID",
    "COREOS_BUILD_ID",
    "COREOS_SDK_VERSION",
)

#: Default name of the file, relative to the scripts directory
DEFAULT_PATH = "version.txt"

_LINE_RE = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)=(.*)$")

_QUOTES = ('"', "'")


class VersionFileError(ValueError):
    """Version file is malformed or incomplete"""

    pass


def current_version(values):
    """Version recorded in a parsed version file

    Args:
        values (PKDict): from `read`

    Returns:
        Version: COREOS_BUILD.COREOS_BRANCH.COREOS_PATCH
    """
    p = []
    for k in KEYS[:3]:
        if k not in values:
            raise VersionFileError("{}: missing from version file".format(k))
        try:
            p.append(version.parse_component(values[k], k))
        except version.VersionError as e:
            raise VersionFileError(str(e))
    return version.Version(*p)


def read(path):
    """Parse a version file

    Args:
        path (str or py.path): file to read

    Returns:
        PKDict: key to unquoted value
    """
    rv = PKDict()
    for n, l in enumerate(pkio.read_text(path).split("\n"), start=1):
        l = l.strip()
        if not l or l.startswith("#"):
            continue
        m = _LINE_RE.search(l)
        if not m:
            raise VersionFileError("{}:{}: invalid line={}".format(path, n, l))
        rv[m.group(1)] = _unquote(m.group(2).strip())
    return rv


def values(release):
    """Key/values to record `release`

    Args:
        release (PKDict): from `coreos.release.plan`

    Returns:
        PKDict: values for each of `KEYS`
    """
    v = release.version
    i = str(v)
    return PKDict(
        COREOS_BUILD=v.major,
        COREOS_BRANCH=v.minor,
        COREOS_PATCH=v.patch,
        COREOS_VERSION=i + "+" + release.build_id if release.build_id else i,
        COREOS_VERSION_ID=i,
        COREOS_BUILD_ID=release.build_id,
        COREOS_SDK_VERSION=release.sdk_version,
    )


def write(path, values):
    """Atomically replace the version file

    Args:
        path (str or py.path): file to write
        values (PKDict): from `values`
    """
    x = set(values.keys()) - set(KEYS)
    if x:
        raise VersionFileError("unknown keys={}".format(sorted(x)))
    pkio.atomic_write(
        path,
        "".join("{}={}\n".format(k, _quote(values.get(k, ""))) for k in KEYS),
    )
    pkdlog("wrote path={} version={}", path, values.get("COREOS_VERSION"))


def _quote(value):
    v = str(value)
    if v == "" or re.search(r"[^\w.+:/@-]", v):
        return '"{}"'.format(v.replace("\\", "\\\\").replace('"', '\\"'))
    return v


def _unquote(value):
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        v = value[1:-1]
        if value[0] == '"':
            return re.sub(r'\\(["\\$`])', r"\1", v)
        return v
    return value
