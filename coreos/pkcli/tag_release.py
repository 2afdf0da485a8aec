"""Record the next release version

Reads the current version file, computes the next version (see
`coreos.release`), and rewrites the file. Prints the branch and tag
names for the source control step, which is run separately::

    $ coreos tag_release --sdk-version 366.0.0
    branch=build-367
    tag=v367.0.0

:copyright: Copyright (c) 2014 CoreOS, Inc.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkcli
from pykern import pkio
from pykern.pkdebug import pkdlog
import coreos
import coreos.date_codec
import coreos.release
import coreos.version
import coreos.version_file


def default_command(
    version_file=coreos.version_file.DEFAULT_PATH,
    major=None,
    minor=None,
    patch=None,
    sdk_version=None,
    branch=None,
    build_number=None,
):
    """Compute the next version and write it to `version_file`

    Nothing is written if the new version is the same as the SDK.

    Args:
        version_file (str): key=value file [version.txt]
        major (int): override today's day index
        minor (int): override the computed minor
        patch (int): override patch [0]
        sdk_version (str): SDK version [current version]
        branch (str): CI branch, requires `build_number`
        build_number (int): CI build counter, requires `branch`

    Returns:
        str: branch and tag as shell assignments
    """
    try:
        v = coreos.version_file.read(version_file)
    except Exception as e:
        if pkio.exception_is_not_found(e):
            pkcli.command_error("{}: version file not found", version_file)
        raise
    try:
        r = coreos.release.plan(
            coreos.codec(),
            coreos.version_file.current_version(v),
            sdk_version=sdk_version,
            major=_component(major, "major"),
            minor=_component(minor, "minor"),
            patch=_component(patch, "patch"),
            build_id=_build_id(branch, build_number),
        )
    except (
        coreos.date_codec.DateCodecError,
        coreos.release.ReleaseError,
        coreos.version.VersionError,
        coreos.version_file.VersionFileError,
    ) as e:
        pkcli.command_error("{}", e)
    coreos.version_file.write(version_file, coreos.version_file.values(r))
    pkdlog("{}: updated from version={}", version_file, v.get("COREOS_VERSION_ID"))
    return "branch={}\ntag={}".format(r.branch, r.tag)


def _build_id(branch, build_number):
    if branch is None and build_number is None:
        return None
    if branch is None or build_number is None:
        pkcli.command_error(
            "branch={} build_number={}: both or neither must be supplied",
            branch,
            build_number,
        )
    return coreos.version.build_id(branch, build_number)


def _component(value, name):
    if value is None:
        return None
    return coreos.version.parse_component(value, name)
