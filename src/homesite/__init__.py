"""homesite: personal website content pipeline."""

__version__ = "0.3.0"
