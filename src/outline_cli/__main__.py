"""Allow running as ``python -m outline_cli``."""

from outline_cli.cli.app import run


if __name__ == "__main__":
    run()
