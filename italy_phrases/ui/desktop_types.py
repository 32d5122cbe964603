"""Desktop UI interfaces."""

from __future__ import annotations

from typing import Protocol


class DesktopApp(Protocol):
    """A window that shows the phrase list and hands user actions to the controller.

    ``launch`` builds the screen on first use, loads the saved order through
    the controller and blocks in the toolkit main loop until the window closes.
    """

    title: str

    def launch(self) -> None:
        """Show the phrase screen and run until it is closed."""
