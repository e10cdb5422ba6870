"""Tests for the résumé schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from homesite.domain.frontmatter import decode_frontmatter
from homesite.domain.links import GitHubLink, OtherLink
from homesite.domain.resume import Resume, ResumeProject

RESUME_YAML = """\
education:
  - what: BSc Computer Science
    where: Example University
    when: 2015 - 2019
skills:
  - title: Languages
    list: [Python, Rust]
projects:
  - title: homesite
    url: https://example.com
    list:
      - Personal website
    links:
      Demo: https://demo.example.com
      GitHub: https://github.com/example/homesite
experience:
  - where: Example Corp
    role: Engineer
    location: Remote
    when: 2019 - present
    list:
      - Built things
"""


class TestResume:
    def test_full_resume(self) -> None:
        resume = decode_frontmatter(RESUME_YAML, Resume)
        assert resume.education[0].where == "Example University"
        assert resume.skills[0].items == ["Python", "Rust"]
        assert resume.experience[0].role == "Engineer"
        assert resume.experience[0].items == ["Built things"]

    def test_project_links_sorted(self) -> None:
        project = decode_frontmatter(RESUME_YAML, Resume).projects[0]
        assert project.links == [
            GitHubLink(url="https://github.com/example/homesite"),
            OtherLink(title="Demo", url="https://demo.example.com"),
        ]

    def test_sections_default_empty(self) -> None:
        resume = Resume.model_validate({})
        assert resume.education == []
        assert resume.projects == []

    def test_project_without_url_or_links(self) -> None:
        project = ResumeProject.model_validate({"title": "x", "list": ["a"]})
        assert project.url is None
        assert project.links is None
        assert project.items == ["a"]

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValidationError):
            Resume.model_validate({"education": [{"what": "x"}]})

    def test_entries_require_list(self) -> None:
        with pytest.raises(ValidationError):
            Resume.model_validate({"skills": [{"title": "Languages"}]})
        with pytest.raises(ValidationError):
            ResumeProject.model_validate({"title": "x"})
