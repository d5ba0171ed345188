"""Allow ``python -m carfuel``."""

from carfuel.cli import run

if __name__ == "__main__":
    run()
