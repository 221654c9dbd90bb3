from __future__ import annotations

# Facade module that re-exports AnchorHex core functionality.
# Used by the Flask app and tests; single-responsibility modules
# live under anchorhex_core/*.

# Prefer the relative import when loaded as part of a package, then the
# installed top-level package.
try:
    from .anchorhex_core.board import (  # type: ignore
        Board,
        Cell,
        Coord,
        Layout,
        LAYOUT_8X8,
        LAYOUT_10X10,
        Player,
        board_from_cells,
        board_from_rows,
        layout_for_size,
        make_initial_board,
    )
    from .anchorhex_core.hexgrid import in_bounds, neighbors  # type: ignore
    from .anchorhex_core.reach import (  # type: ignore
        Mask,
        ReachMode,
        mask_any,
        mask_coords,
        reachable_from_base,
    )
    from .anchorhex_core.hashkey import fingerprint, parse_fingerprint  # type: ignore
    from .anchorhex_core.rules import (  # type: ignore
        AreaScore,
        LegalityPolicy,
        both_players_have_no_legal_moves,
        compute_area_score,
        is_legal_move,
        legal_moves,
        parse_policy,
        resolve_captures,
        territory_masks,
    )
    from .anchorhex_core.state import GameState, new_game  # type: ignore
    from .anchorhex_core.moves import (  # type: ignore
        Rejection,
        is_game_over,
        pass_turn,
        place_stone,
        play_move,
        rejection_reason,
        session_legal_moves,
        undo_move,
    )
except ImportError:
    from anchorhex_core.board import (  # type: ignore
        Board,
        Cell,
        Coord,
        Layout,
        LAYOUT_8X8,
        LAYOUT_10X10,
        Player,
        board_from_cells,
        board_from_rows,
        layout_for_size,
        make_initial_board,
    )
    from anchorhex_core.hexgrid import in_bounds, neighbors  # type: ignore
    from anchorhex_core.reach import (  # type: ignore
        Mask,
        ReachMode,
        mask_any,
        mask_coords,
        reachable_from_base,
    )
    from anchorhex_core.hashkey import fingerprint, parse_fingerprint  # type: ignore
    from anchorhex_core.rules import (  # type: ignore
        AreaScore,
        LegalityPolicy,
        both_players_have_no_legal_moves,
        compute_area_score,
        is_legal_move,
        legal_moves,
        parse_policy,
        resolve_captures,
        territory_masks,
    )
    from anchorhex_core.state import GameState, new_game  # type: ignore
    from anchorhex_core.moves import (  # type: ignore
        Rejection,
        is_game_over,
        pass_turn,
        place_stone,
        play_move,
        rejection_reason,
        session_legal_moves,
        undo_move,
    )


def main() -> None:
    # CLI driver delegated to anchorhex_core.cli
    try:
        from .anchorhex_core.cli import main as _main  # type: ignore
    except ImportError:
        from anchorhex_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
