"""hoppath: shortest connection chains over integer-keyed edge lists."""

__version__ = "0.1.0"
