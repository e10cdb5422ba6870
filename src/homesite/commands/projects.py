"""Command group: projects (list, show)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homesite.commands._base import SiteGroup
from homesite.services.projects import ProjectService

if TYPE_CHECKING:
    from homesite.commands._context import AppContext

_PROJECTS_EXAMPLES = """\
  homesite projects list
  homesite --disable-filter projects list
  homesite projects show my-project
  homesite -q projects show my-project > my-project.html"""


@click.group(cls=SiteGroup, examples=_PROJECTS_EXAMPLES)
def projects() -> None:
    """List and show projects."""


@projects.command("list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List projects, newest first."""
    app.emit(app.service(ProjectService).list_projects())


@projects.command("show", examples="  homesite projects show my-project")
@click.argument("slug")
@click.pass_obj
def show(app: AppContext, slug: str) -> None:
    """Render the project named SLUG to HTML."""
    app.emit(app.service(ProjectService).get_project(slug))
