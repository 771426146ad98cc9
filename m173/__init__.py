"""Game model for a Minecraft Beta 1.7.3 compatible server: config, items, blocks, entities and commands."""

__version__ = "0.0.1"