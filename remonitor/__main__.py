"""Entry point for ``python -m remonitor``."""

from __future__ import annotations


def main() -> None:
    from remonitor.cli.commands import app

    app()


if __name__ == "__main__":
    main()
