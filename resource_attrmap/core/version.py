"""Version information for resource-attrmap."""

__version__ = "1.0.0"
