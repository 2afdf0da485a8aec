"""Front-end command line for :mod:`coreos.pkcli`.

:copyright: Copyright (c) 2014 CoreOS, Inc.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

from pykern import pkcli
import sys


def main():
    return pkcli.main("coreos")


if __name__ == "__main__":
    sys.exit(main())
