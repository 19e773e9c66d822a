"""
CLI Commands.

Organized by domain/feature area.
"""

from blogapi.cli.commands import blogs

__all__ = ["blogs"]
