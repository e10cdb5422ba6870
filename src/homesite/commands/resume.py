"""Command: resume."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homesite.commands._base import SiteCommand
from homesite.services.resume import ResumeService

if TYPE_CHECKING:
    from homesite.commands._context import AppContext


@click.command(cls=SiteCommand, examples="  homesite --json resume")
@click.pass_obj
def resume(app: AppContext) -> None:
    """Show the résumé data."""
    app.emit(app.service(ResumeService).get_resume())
