"""Command: wishlist."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homesite.commands._base import SiteCommand
from homesite.services.wishlist import WishlistService

if TYPE_CHECKING:
    from homesite.commands._context import AppContext


@click.command(
    cls=SiteCommand,
    examples="  homesite wishlist\n  homesite --json wishlist",
)
@click.pass_obj
def wishlist(app: AppContext) -> None:
    """Render every wishlist post, newest first."""
    app.emit(app.service(WishlistService).list_wishlist())
