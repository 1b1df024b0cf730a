"""Terminal browser for a folder of Markdown notes, with YAML configuration."""

__version__ = "0.1.0"

__all__ = ["__version__"]