"""Domain layer: document lifecycle, frontmatter schemas, and links.

This layer depends on stdlib, pydantic, and ruamel.yaml. Markdown
parsing is reached only through :mod:`homesite.infrastructure.markdown`.
It must never import from services, commands, or config.
"""
