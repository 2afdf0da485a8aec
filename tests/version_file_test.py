"""pytest for `coreos.version_file`

:copyright: Copyright (c) 2014 CoreOS, Inc.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""


def test_read():
    from coreos import version, version_file
    from pykern import pkio, pkunit

    with pkunit.save_chdir_work():
        pkio.write_text(
            "version.txt",
            """# generated
COREOS_BUILD=367
COREOS_BRANCH=2

COREOS_PATCH='1'
COREOS_VERSION_ID="367.2.1"
COREOS_BUILD_ID=""
""",
        )
        v = version_file.read("version.txt")
        pkunit.pkeq("367.2.1", v.COREOS_VERSION_ID)
        pkunit.pkeq("", v.COREOS_BUILD_ID)
        pkunit.pkeq(version.Version(367, 2, 1), version_file.current_version(v))


def test_read_deviance():
    from coreos import version_file
    from pykern import pkio, pkunit

    with pkunit.save_chdir_work():
        pkio.write_text("bad.txt", "COREOS_BUILD=1\nthis is not valid\n")
        with pkunit.pkexcept(r"bad.txt:2: invalid line"):
            version_file.read("bad.txt")
    with pkunit.pkexcept("COREOS_PATCH: missing"):
        version_file.current_version({"COREOS_BUILD": "1", "COREOS_BRANCH": "0"})
    with pkunit.pkexcept("COREOS_BRANCH=x"):
        version_file.current_version(
            {"COREOS_BUILD": "1", "COREOS_BRANCH": "x", "COREOS_PATCH": "0"},
        )


def test_write():
    from coreos import version, version_file
    from pykern import pkio, pkunit
    from pykern.pkcollections import PKDict

    r = PKDict(
        version=version.Version(367, 2, 0),
        sdk_version="367.1.0",
        build_id="master-1234",
    )
    with pkunit.save_chdir_work():
        version_file.write("version.txt", version_file.values(r))
        pkunit.pkeq(
            """COREOS_BUILD=367
COREOS_BRANCH=2
COREOS_PATCH=0
COREOS_VERSION=367.2.0+master-1234
COREOS_VERSION_ID=367.2.0
COREOS_BUILD_ID=master-1234
COREOS_SDK_VERSION=367.1.0
""",
            pkio.read_text("version.txt"),
        )
        r.build_id = ""
        version_file.write("version.txt", version_file.values(r))
        v = version_file.read("version.txt")
        pkunit.pkeq("367.2.0", v.COREOS_VERSION)
        pkunit.pkeq("", v.COREOS_BUILD_ID)
        pkunit.pkeq(version.Version(367, 2, 0), version_file.current_version(v))
        with pkunit.pkexcept("unknown keys"):
            version_file.write("version.txt", PKDict(NOT_A_KEY=1))
