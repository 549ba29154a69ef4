"""
Line-based text protocol for driving the Othello engine.

A front end (or a person at a terminal) sends one command per line on stdin
and reads replies on stdout. The command set is modelled on UCI but is fully
synchronous: "go" searches to a fixed depth and replies before the next
command is read, so there is no search thread and no "stop".

Commands:
    newgame                                 reset to the start position
    position startpos [moves m1 m2 ...]     start position plus moves
    position board <64 cells> [turn 1|2]    arbitrary position ('.', 'X', 'O')
    go [depth N]                            info line, then "bestmove <sq>"
    legal                                   "legal d3:1 c4:1 ..." or "legal none"
    play <sq>|pass                          apply a move for the side to move
    show                                    board, side to move, disc counts
    quit                                    exit

Moves are square names ("d3"). "pass" is accepted only when the side to move
has no legal move. "go" replies "bestmove pass" in that case and
"bestmove none" once the game is over.

Critical rule: stdout carries protocol replies only. Diagnostics go through
logging, which is configured to write to stderr.
"""

import logging
import sys
import time
from typing import Iterable, TextIO

from pydantic import BaseModel, ValidationError, field_validator

from othello.board import Board, opponent, player_scores
from othello.constants import (
    CELL_SYMBOLS,
    DEFAULT_DEPTH,
    MAX_SEARCH_DEPTH,
    NUM_SQUARES,
    PLAYER_ONE,
    PLAYER_TWO,
    PLAYERS,
)
from othello.errors import IllegalMoveApplied, InvalidInput
from othello.game import is_game_over
from othello.moves import has_no_moves, is_legal_move, legal_moves
from othello.notation import format_move, parse_move
from othello.search import SearchStats, best_move
from othello.transform import apply_move

_log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class PositionRequest(BaseModel):
    """
    An explicit position sent with "position board".

    Fields:
        cells: 64 cell symbols in row-major order ('.', 'X', 'O'; any case).
        turn:  Side to move, PLAYER_ONE (X) or PLAYER_TWO (O).
    """

    cells: str
    turn: int = PLAYER_ONE

    @field_validator("cells")
    @classmethod
    def check_cells(cls, v: str) -> str:
        """Require exactly 64 known cell symbols."""
        v = "".join(v.split()).upper()
        if len(v) != NUM_SQUARES:
            raise ValueError(f"expected {NUM_SQUARES} cells, got {len(v)}")
        unknown = set(v) - set(CELL_SYMBOLS.values())
        if unknown:
            raise ValueError(f"unknown cell symbols: {''.join(sorted(unknown))}")
        return v

    @field_validator("turn")
    @classmethod
    def check_turn(cls, v: int) -> int:
        if v not in PLAYERS:
            raise ValueError(f"turn must be {PLAYER_ONE} or {PLAYER_TWO}, got {v}")
        return v

    def to_board(self) -> Board:
        return Board.from_text(self.cells)


class GoRequest(BaseModel):
    """
    Search options sent with "go".

    Fields:
        depth: Plies to search, clamped to [1, MAX_SEARCH_DEPTH] so a typo
               cannot start a search that never finishes.
    """

    depth: int = DEFAULT_DEPTH

    @field_validator("depth")
    @classmethod
    def clamp_depth(cls, v: int) -> int:
        """Clamp depth to a safe operating range."""
        return max(1, min(v, MAX_SEARCH_DEPTH))


# ---------------------------------------------------------------------------
# Handler
# ---------------------------------------------------------------------------


class ProtocolHandler:
    """
    Stateful handler for the text protocol.

    Holds the current position and the side to move. The main loop creates
    one instance and dispatches each line to handle_line().

    Attributes:
        board:  The current position.
        player: Side to move.
        out:    Stream replies are written to.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self.board: Board = Board.initial()
        self.player: int = PLAYER_ONE
        self.out: TextIO = out if out is not None else sys.stdout

    def send(self, line: str) -> None:
        """Write one reply line and flush so a front end never blocks."""
        print(line, file=self.out, flush=True)

    # -----------------------------------------------------------------------
    # Dispatch
    # -----------------------------------------------------------------------

    def handle_line(self, line: str) -> bool:
        """
        Run one command line. Returns False when the loop should exit.

        Bad input (unknown squares, illegal moves, failed validation) is
        answered with an "error" line; the handler state is left as it was.
        """
        tokens = line.split()
        if not tokens:
            return True
        command, args = tokens[0].lower(), tokens[1:]

        if command == "quit":
            return False

        handlers = {
            "newgame": self.handle_newgame,
            "position": self.handle_position,
            "go": self.handle_go,
            "legal": self.handle_legal,
            "play": self.handle_play,
            "show": self.handle_show,
        }
        handler = handlers.get(command)
        if handler is None:
            _log.warning("ignoring unknown command: %r", command)
            self.send(f"error unknown command {command}")
            return True

        try:
            handler(args)
        except ValidationError as exc:
            self.send(f"error {exc.errors()[0]['msg']}")
        except InvalidInput as exc:
            self.send(f"error {exc}")
        return True

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_newgame(self, args: list[str]) -> None:
        self.board = Board.initial()
        self.player = PLAYER_ONE

    def handle_position(self, args: list[str]) -> None:
        """
        Set the current position.

        Formats:
            position startpos
            position startpos moves d3 c5 ...
            position board <64 cells> [turn 1|2]

        The move list is replayed on a scratch copy and only committed if
        every move is legal.
        """
        if not args:
            raise InvalidInput("position needs 'startpos' or 'board'")

        if args[0] == "startpos":
            board, player = Board.initial(), PLAYER_ONE
            if len(args) > 1:
                if args[1] != "moves":
                    raise InvalidInput(f"expected 'moves', got {args[1]!r}")
                for token in args[2:]:
                    board, player = self._play(board, player, token)
        elif args[0] == "board":
            if len(args) < 2:
                raise InvalidInput("position board needs 64 cells")
            turn = PLAYER_ONE
            if len(args) >= 4 and args[2] == "turn":
                turn = args[3]
            elif len(args) != 2:
                raise InvalidInput("expected 'position board <cells> [turn 1|2]'")
            request = PositionRequest(cells=args[1], turn=turn)
            board, player = request.to_board(), request.turn
        else:
            raise InvalidInput(f"unknown position type {args[0]!r}")

        self.board, self.player = board, player

    def handle_go(self, args: list[str]) -> None:
        """
        Search the current position and reply with the chosen move.

        Replies:
            info depth <d> score <v> nodes <n> time <ms>
            bestmove <square>
        or "bestmove pass" when the side to move must pass, and
        "bestmove none" when the game is over.
        """
        options = dict(zip(args[::2], args[1::2]))
        request = GoRequest(**({"depth": options["depth"]} if "depth" in options else {}))

        if is_game_over(self.board):
            self.send("bestmove none")
            return

        stats = SearchStats()
        start = time.monotonic()
        result = best_move(self.board, self.player, request.depth, stats)
        elapsed_ms = int((time.monotonic() - start) * 1000)

        if result is None:
            self.send("bestmove pass")
            return

        self.send(
            f"info depth {request.depth} score {result.value} "
            f"nodes {stats.node_count} time {elapsed_ms}"
        )
        self.send(f"bestmove {format_move(result.coords)}")

    def handle_legal(self, args: list[str]) -> None:
        moves = legal_moves(self.board, self.player)
        if moves is None:
            self.send("legal none")
            return
        listed = " ".join(f"{format_move(m.coords)}:{m.capture_count}" for m in moves)
        self.send(f"legal {listed}")

    def handle_play(self, args: list[str]) -> None:
        if len(args) != 1:
            raise InvalidInput("play needs exactly one move")
        self.board, self.player = self._play(self.board, self.player, args[0])

    def handle_show(self, args: list[str]) -> None:
        for line in self.board.to_text().splitlines():
            self.send(line)
        ones, twos = player_scores(self.board, PLAYER_ONE, PLAYER_TWO)
        self.send(f"turn {CELL_SYMBOLS[self.player]}")
        self.send(f"score {CELL_SYMBOLS[PLAYER_ONE]}={ones} {CELL_SYMBOLS[PLAYER_TWO]}={twos}")

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    @staticmethod
    def _play(board: Board, player: int, token: str) -> tuple[Board, int]:
        """Apply one move token for player and hand the turn over."""
        coords = parse_move(token)
        if coords is None:
            if not has_no_moves(board, player):
                raise IllegalMoveApplied("cannot pass with legal moves available")
        elif not is_legal_move(board, coords[0], coords[1], player):
            raise IllegalMoveApplied(f"illegal move {token}")
        return apply_move(board, coords, player), opponent(player)


def run_protocol_loop(lines: Iterable[str], handler: ProtocolHandler | None = None) -> None:
    """
    Read commands from lines until "quit" or end of input.

    Each command runs inside handle_line, which turns bad input into
    "error" replies, so one malformed line never ends the session.
    """
    handler = handler if handler is not None else ProtocolHandler()
    for raw_line in lines:
        if not handler.handle_line(raw_line.strip()):
            break


def main() -> None:
    """Console entry point: serve the protocol on stdin/stdout."""
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_protocol_loop(sys.stdin)


if __name__ == "__main__":
    main()
