"""Fetch Minecraft mods from Modrinth for a chosen game version and loader."""

__version__ = "0.1.0"

__all__ = ["__version__"]