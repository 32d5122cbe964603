"""Module entrypoint for launching the desktop app."""
from __future__ import annotations

import app


def main() -> None:
    app.launch()


if __name__ == "__main__":
    main()
