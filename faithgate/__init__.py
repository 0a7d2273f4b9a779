"""faithgate — faith-alignment content moderation gate."""

__version__ = "0.1.0"
