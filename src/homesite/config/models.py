"""Section models for ``homesite.toml``.

Only overrides need to appear in the file; every path has a default
relative to the content root.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class ContentConfig(BaseModel):
    """[content] section.

    Paths are relative to the content root unless absolute.
    """

    model_config = {"frozen": True}

    projects_dir: Path = Path("projects")
    wishlist_dir: Path = Path("posts/wishlist")
    resume_file: Path = Path("posts/resume.yaml")
