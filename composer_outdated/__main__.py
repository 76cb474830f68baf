"""Allow ``python -m composer_outdated``."""

from composer_outdated.cli import cli

if __name__ == "__main__":
    cli()
