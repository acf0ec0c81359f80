"""Action validation helpers.

Every command, whoever sends it, goes through the same validator pipeline
before it touches the game state.
"""
