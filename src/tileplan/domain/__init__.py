"""Domain layer — units, geometry, room shapes, tiling, and quantities.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
Every function here is pure: same inputs, same outputs, no shared state.
"""
