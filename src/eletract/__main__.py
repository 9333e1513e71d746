"""Allow running eletract with ``python -m eletract``."""

from eletract.cli.main import cli

if __name__ == "__main__":
    cli()
