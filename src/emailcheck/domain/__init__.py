"""Domain layer — syntax rules and the address validator.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
