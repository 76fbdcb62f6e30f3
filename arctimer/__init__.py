"""ArcTimer — an analog countdown timer face."""

__version__ = "0.1.0"
