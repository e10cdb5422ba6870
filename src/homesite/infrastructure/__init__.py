"""Infrastructure layer: filesystem and Markdown engine.

This layer depends on stdlib and third-party libs (markdown-it-py).
It must never import from domain, services, commands, or output.
"""
