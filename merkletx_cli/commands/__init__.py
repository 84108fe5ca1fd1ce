"""
CLI command modules.
"""

from merkletx_cli.commands import demo, explore, prove

__all__ = ["demo", "explore", "prove"]
