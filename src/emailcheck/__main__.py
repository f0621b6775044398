"""Allow ``python -m emailcheck``."""

from emailcheck.cli import cli

if __name__ == "__main__":
    cli()
