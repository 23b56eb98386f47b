from designkit.cli.main import cli

__all__ = ["cli"]
