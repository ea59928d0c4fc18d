"""Ad Astra: a retro pixel-art vertical space shooter built on pygame."""

__version__ = "1.0.0"

__all__ = ["__version__"]