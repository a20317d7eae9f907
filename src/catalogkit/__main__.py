"""Allow ``python -m catalogkit``."""

from catalogkit.cli import run


if __name__ == "__main__":
    run()
