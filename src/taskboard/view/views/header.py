# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from taskboard.view.state import get_show_header


def header(space_name: Optional[str], sub_header: Optional[str] = None) -> None:
    """Print the application header with the space being viewed.

    Args:
        space_name: The space id the view is scoped to, or None for all spaces
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    space = f"[plum1]{space_name if space_name is not None else 'all spaces'}[/plum1]"

    print(Padding("[dark_orange]taskboard[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(space, (0, 1)))
