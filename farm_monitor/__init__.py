"""Farm monitoring: weather collection and crop health scoring."""

__version__ = "1.0.0"
