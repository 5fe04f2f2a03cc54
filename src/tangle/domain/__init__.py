"""Domain layer: entities, cards, fields, and their rules.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
