"""Domain layer — identifier types, checksum rules, and the validated value.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
