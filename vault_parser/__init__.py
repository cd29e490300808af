"""Password-manager vault export parser."""
__version__ = "1.0.0"
