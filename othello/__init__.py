"""
Othello AI engine package.

This package implements a classical Othello (Reversi) engine using negamax
search with alpha-beta pruning over an immutable 8x8 board and a
hand-crafted positional evaluation.

Modules:
    constants - Cell values, weight table, score bounds, and search parameters
    errors    - Exceptions raised for malformed input at the engine boundary
    board     - Immutable board value, bounds checking, player identities
    moves     - Legal move detection and capture counting
    transform - Applying a move and flipping captured discs
    evaluate  - Static positional evaluation and terminal scoring
    search    - Negamax alpha-beta search (and a plain minimax reference)
    notation  - Algebraic square names ("d3") for moves
    game      - Turn order, game-over detection, and a self-play loop
"""
