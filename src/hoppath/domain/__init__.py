"""Domain layer: error taxonomy shared by every other layer.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
