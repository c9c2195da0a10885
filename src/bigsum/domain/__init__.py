"""Domain layer: signed integer values and digit-sequence arithmetic.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
