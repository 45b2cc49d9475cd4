import pytest

from tttbot.board import Board, apply_move, deserialize_board, player_to_move
from tttbot.minimax import MAX_SCORE, SearchResult, best_move


@pytest.fixture(scope="module")
def empty_result():
    return best_move(Board())


def test_empty_board_is_forced_draw(empty_result):
    assert empty_result.score == 0


def test_empty_board_picks_lowest_index_opening(empty_result):
    # every opening draws; ascending scan keeps the first one
    assert empty_result == SearchResult(0, 0)


def test_immediate_win_scores_one_halving():
    # X at 0,1 and O at 3,4; X to move
    b = deserialize_board("110220000")
    assert best_move(b) == (2, MAX_SCORE >> 1)
    assert best_move(b).score == 512


def test_o_takes_immediate_win():
    # O at 3,4 threatens 5; X threatens 2 but O is to move
    b = deserialize_board("110220100")
    assert best_move(b) == (5, -512)


def test_win_preferred_over_block():
    # O threatens 2, X can win at 6
    b = deserialize_board("220000011")
    assert best_move(b) == (6, 512)


def test_tie_between_two_wins_takes_lower_index():
    # X wins at 2 (top row) or 8 (diagonal)
    b = deserialize_board("110012220")
    assert best_move(b) == (2, 512)


def test_delays_forced_loss():
    # O at 0,4 threatens 8. Blocking still loses to a fork, but two plies later:
    # block -> -64, anything else -> -256.
    b = deserialize_board("210020010")
    assert best_move(b) == (8, -64)
    other = b.place(2, player_to_move(b))
    assert best_move(other).score >> 1 == -256


def test_doomed_side_to_move_gets_slowest_loss():
    # O to move against an X double threat (2 and 6); every reply loses next ply
    b = deserialize_board("110120002")
    res = best_move(b)
    assert res == (2, 256)


@pytest.mark.parametrize("key,expected", [
    ("121122211", SearchResult(None, 0)),
    ("111220000", SearchResult(None, MAX_SCORE)),
    ("110222100", SearchResult(None, -MAX_SCORE)),
])
def test_terminal_boards_return_sentinel(key, expected):
    assert best_move(deserialize_board(key)) == expected


def test_search_does_not_mutate_board():
    b = deserialize_board("100020000")
    before = b.copy()
    best_move(b)
    assert b == before


def test_result_matches_chosen_child():
    b = deserialize_board("100020000")
    res = best_move(b)
    child = b.place(res.move, player_to_move(b))
    assert res.score == best_move(child).score >> 1


def test_bot_vs_bot_game_is_draw():
    b = deserialize_board("100000000")
    while True:
        res = best_move(b)
        if res.move is None:
            break
        apply_move(b, res.move)
    assert res.score == 0
