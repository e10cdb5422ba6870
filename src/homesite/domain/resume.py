"""Résumé page schema.

The résumé is a standalone YAML data file rather than a Markdown
document, so it has no content to render. Skill, project and experience
entries require a ``list`` key holding their bullet points; sections
themselves may be left out::

    experience:
      - where: Example Corp
        role: Engineer
        location: Remote
        when: 2021 - present
        list:
          - Built things
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from homesite.domain.links import Links


class _Entry(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    items: list[str] = Field(alias="list")


class Education(BaseModel):
    model_config = {"frozen": True}

    what: str
    where: str
    when: str


class Skill(_Entry):
    title: str


class ResumeProject(_Entry):
    title: str
    url: str | None = None
    links: Links | None = None


class Experience(_Entry):
    where: str
    role: str
    location: str
    when: str


class Resume(BaseModel):
    """The whole résumé page."""

    model_config = {"frozen": True}

    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[ResumeProject] = Field(default_factory=list)
    experience: list[Experience] = Field(default_factory=list)
