#!/usr/bin/env python3
"""
Benchmark: nodes and time per search, alpha-beta against plain minimax.

Searches a fixed set of positions at several depths twice: once with
alpha-beta pruning and once with the unpruned reference search. A lower node
count for alpha-beta at the same depth shows how much the pruning saves;
the two values must agree (after clamping to the score bounds), and any
disagreement is flagged.

Usage: python3 tools/bench.py [max_depth]
"""
import os
import sys
import time

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO not in sys.path:
    sys.path.insert(0, REPO)

from othello.board import Board, opponent
from othello.constants import MAX_SCORE, MIN_SCORE, PLAYER_ONE
from othello.notation import format_move, parse_move
from othello.search import SearchStats, alpha_beta_search, minimax_search
from othello.transform import apply_move

# Positions given as move sequences from the start position, Black first.
# These are fixed forever so runs can be compared across changes.
POSITIONS = [
    ("Start",         ""),
    ("Perpendicular", "f5 d6"),
    ("Parallel",      "f5 f6"),
    ("Diagonal",      "f5 f4"),
    ("Tiger",         "f5 d6 c3 d3 c4"),
]

DEFAULT_MAX_DEPTH = 4


def replay(moves: str) -> tuple[Board, int]:
    """Play a space-separated move list from the start position."""
    board, player = Board.initial(), PLAYER_ONE
    for token in moves.split():
        board = apply_move(board, parse_move(token), player)
        player = opponent(player)
    return board, player


def _clamp(value: int) -> int:
    return max(MIN_SCORE, min(value, MAX_SCORE))


def run_position(label: str, moves: str, depth: int) -> dict:
    """Search one position at one depth with both searches.

    Args:
        label: Human-readable position name for display.
        moves: Move list leading to the position.
        depth: Search depth in plies.

    Returns:
        Dict with keys: label, depth, move, value, ab_nodes, mm_nodes,
        ab_ms, mm_ms, match.
    """
    board, player = replay(moves)

    ab_stats = SearchStats()
    start = time.monotonic()
    ab = alpha_beta_search(board, player, MIN_SCORE, MAX_SCORE, depth, ab_stats)
    ab_ms = int((time.monotonic() - start) * 1000)

    mm_stats = SearchStats()
    start = time.monotonic()
    mm = minimax_search(board, player, depth, mm_stats)
    mm_ms = int((time.monotonic() - start) * 1000)

    return {
        "label": label,
        "depth": depth,
        "move": format_move(ab.coords),
        "value": ab.value,
        "ab_nodes": ab_stats.node_count,
        "mm_nodes": mm_stats.node_count,
        "ab_ms": ab_ms,
        "mm_ms": mm_ms,
        "match": _clamp(ab.value) == _clamp(mm.value),
    }


def main() -> None:
    """Run all benchmark positions and print a summary table."""
    max_depth = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_MAX_DEPTH

    print(f"Othello engine benchmark: {sys.executable}")
    print()
    print(
        f"{'Position':<14} {'Depth':>5} {'Move':<5} {'Value':>6} "
        f"{'AB nodes':>9} {'MM nodes':>9} {'AB ms':>7} {'MM ms':>7}"
    )
    print("-" * 70)

    mismatches = 0
    for label, moves in POSITIONS:
        for depth in range(1, max_depth + 1):
            r = run_position(label, moves, depth)
            flag = "" if r["match"] else "  MISMATCH"
            mismatches += not r["match"]
            print(
                f"{r['label']:<14} {r['depth']:>5} {r['move']:<5} {r['value']:>6} "
                f"{r['ab_nodes']:>9,} {r['mm_nodes']:>9,} "
                f"{r['ab_ms']:>7,} {r['mm_ms']:>7,}{flag}"
            )

    print("-" * 70)
    if mismatches:
        print(f"{mismatches} value mismatch(es) between alpha-beta and minimax")
        sys.exit(1)
    print("alpha-beta and minimax agree on every position")


if __name__ == "__main__":
    main()
