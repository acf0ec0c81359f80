"""Cards, the 18-slot board, game snapshots, dealing, errors and result events.

Nothing in here knows how a game is hosted or stored. Each function takes a
``GameState`` and hands back a new one.
"""
