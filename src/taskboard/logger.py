# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Route the package's log records through rich.

    Warnings and errors are shown by default; ``verbose`` lowers the
    threshold to debug.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )
