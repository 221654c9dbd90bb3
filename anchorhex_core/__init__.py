"""
AnchorHex core Python package.

Pure rules engine for the AnchorHex hex connection game plus a small
in-memory session layer. Every function takes immutable values and returns
new ones; nothing here performs I/O.
Modules:
- board.py: Cell, Player, Layout, Board
- hexgrid.py: bounds and even-q hex neighbours
- reach.py: base reachability masks
- hashkey.py: board fingerprints
- rules.py: legality, capture resolution, area scoring
- moves.py: stone placement and session play/pass/undo
- state.py: GameState
- cli.py: terminal hot-seat play
"""
