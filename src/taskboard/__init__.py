# SPDX-License-Identifier: MIT

from taskboard.cleanup import register_cleanup
from taskboard.initialize import initialize
from taskboard.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
