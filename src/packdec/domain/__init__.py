"""Domain layer: grammar, decomposition, packing, and the value record.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
