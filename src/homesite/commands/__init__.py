"""Subcommand modules for homesite.

Provides register_commands() which uses deferred imports to keep
``homesite --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from homesite.commands.projects import projects

    cli.add_command(projects)

    # --- Standalone commands ---
    from homesite.commands.resume import resume
    from homesite.commands.wishlist import wishlist

    cli.add_command(wishlist)
    cli.add_command(resume)
