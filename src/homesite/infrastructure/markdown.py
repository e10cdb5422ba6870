"""markdown-it parsers for frontmatter lookup and HTML rendering.

Two configurations share the front-matter rule:

- :func:`build_frontmatter_parser`: ``zero`` preset, used only to find
  the frontmatter node in the syntax tree.
- :func:`build_html_renderer`: ``commonmark`` preset with raw HTML
  disabled. Frontmatter renders as nothing and every link is forced to
  open in a new tab without htmx boosting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.front_matter import front_matter_plugin

if TYPE_CHECKING:
    from collections.abc import Sequence

    from markdown_it.renderer import RendererHTML
    from markdown_it.token import Token
    from markdown_it.utils import EnvType, OptionsDict

# Attributes added to every rendered anchor.
LINK_ATTRIBUTES: dict[str, str] = {
    "hx-boost": "false",
    "target": "_blank",
}


def build_frontmatter_parser() -> MarkdownIt:
    """Parser with every construct off except frontmatter."""
    return MarkdownIt("zero").use(front_matter_plugin)


def _render_link_open(
    self: RendererHTML,
    tokens: Sequence[Token],
    idx: int,
    options: OptionsDict,
    env: EnvType,
) -> str:
    token = tokens[idx]
    for name, value in LINK_ATTRIBUTES.items():
        token.attrSet(name, value)
    return self.renderToken(tokens, idx, options, env)


def build_html_renderer() -> MarkdownIt:
    """CommonMark renderer with frontmatter support and rewritten links."""
    md = MarkdownIt("commonmark", {"html": False}).use(front_matter_plugin)
    md.add_render_rule("link_open", _render_link_open)
    return md


def render_html(text: str, md: MarkdownIt | None = None) -> str:
    """Render Markdown *text* to HTML."""
    renderer = md if md is not None else build_html_renderer()
    return renderer.render(text)


def parse_tree(text: str, md: MarkdownIt | None = None) -> SyntaxTreeNode:
    """Parse *text* into a syntax tree rooted at a ``root`` node."""
    parser = md if md is not None else build_frontmatter_parser()
    return SyntaxTreeNode(parser.parse(text))
