"""
quickswitch entrypoint

Goals
- Console-script target (`quickswitch`) and `python -m quickswitch.cli.entry`.
"""

from __future__ import annotations

from quickswitch.cli.cli import main


def run() -> None:
    main()


if __name__ == "__main__":
    run()
