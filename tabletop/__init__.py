"""
Tabletop - Rules engine for casual board games.

A deterministic, rules-driven engine behind a browser UI:
- Immutable game state for a gem/card game
- A pure transition function that accepts or rejects each action
- Legal action generation and winner determination
- A client for the shut-the-box best-move service
"""

__version__ = "0.1.0"
