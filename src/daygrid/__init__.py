# SPDX-License-Identifier: MIT

from daygrid.initialize import initialize
from daygrid.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
