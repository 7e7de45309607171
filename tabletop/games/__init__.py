"""
Games module - Game-specific catalogs and state.

Each game has its own subpackage:
- splendor: card and location tile catalogs, setup, board metrics
- shut_the_box: dice and tile state
"""
