from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .board import Coord, layout_for_size
from .moves import (
    Rejection,
    is_game_over,
    pass_turn,
    play_move,
    rejection_reason,
    session_legal_moves,
    undo_move,
)
from .rules import compute_area_score, parse_policy
from .state import GameState, new_game

REASON_TEXT = {
    Rejection.OUT_OF_BOUNDS: 'That cell is off the board.',
    Rejection.OCCUPIED: 'That cell is occupied.',
    Rejection.ILLEGAL: 'Not a legal move: the stone would not connect to your base.',
    Rejection.REPETITION: 'Not a legal move: it repeats an earlier position.',
}


def parse_move(text: str) -> Optional[Coord]:
    """Parses 'r,c' or 'r c' into a coordinate; None when the text is not a coordinate."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t.strip() != '']
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def score_line(state: GameState) -> str:
    s = compute_area_score(state.board)
    return (
        f"White {s.white_total} (stones {s.white_stones} + territory {s.white_territory}) | "
        f"Black {s.black_total} (stones {s.black_stones} + territory {s.black_territory})"
    )


def result_line(state: GameState) -> str:
    s = compute_area_score(state.board)
    if s.winner is None:
        return f"Game over. Draw {s.white_total} : {s.black_total}"
    hi, lo = max(s.white_total, s.black_total), min(s.white_total, s.black_total)
    return f"Game over. {s.winner.value.title()} wins {hi} : {lo}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='AnchorHex rules engine: hex connection game')
    parser.add_argument('--size', choices=['8', '10'], default='10', help='Board size (NxN): 8 or 10')
    parser.add_argument('--policy', choices=['strict', 'permissive'], default='permissive',
                        help='Legality policy for placements')
    parser.add_argument('--no-superko', action='store_true', help='Allow repeated positions')
    parser.add_argument('--play', action='store_true', help='Play a hot-seat game in the terminal')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    state = new_game(
        layout=layout_for_size(int(args.size)),
        policy=parse_policy(args.policy),
        superko=not args.no_superko,
    )

    if not args.play:
        moves = session_legal_moves(state)
        print('Initial board:')
        print(state.board.pretty(set(moves)))
        print(f"{state.turn.value} to move, {len(moves)} legal moves")
        print(score_line(state))
        return

    print("Enter r,c to place, 'p' to pass, 'u' to undo, 'q' to quit.")
    while True:
        moves = session_legal_moves(state)
        print()
        print(state.board.pretty(set(moves)))
        print(score_line(state))
        if is_game_over(state):
            print(result_line(state))
            break
        text = input(f"Move #{state.move_number()} {state.turn.value}> ").strip().lower()
        if text == 'q':
            break
        if text == 'u':
            prev = undo_move(state)
            if prev is None:
                print('Nothing to undo.')
            else:
                state = prev
            continue
        if text == 'p':
            nxt = pass_turn(state)
            if nxt is None:
                print('You can only pass when you have no legal move.')
            else:
                state = nxt
            continue
        move = parse_move(text)
        if move is None:
            print('Could not parse. Try again.')
            continue
        nxt = play_move(state, move)
        if nxt is None:
            reason = rejection_reason(state.board, state.turn, move[0], move[1], state.forbidden(), state.policy)
            print(REASON_TEXT[reason] if reason else 'Not a legal move.')
            continue
        state = nxt


if __name__ == '__main__':
    main()
