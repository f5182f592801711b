import copy

from tetris_board import collides, empty_grid, merge, sweep
from tetris_piece import COLS, PIECES, ROWS

I, J, L, O, S, T, Z = PIECES


def test_empty_grid_dimensions():
    g = empty_grid()
    assert len(g) == ROWS
    assert all(len(r) == COLS and not any(r) for r in g)
    g[0][0] = 1
    assert g[1][0] == 0


def test_collides_walls_and_floor():
    g = empty_grid()
    assert not collides(g, O, (0, 0))
    assert not collides(g, O, (18, 8))
    assert collides(g, O, (0, -1))
    assert collides(g, O, (0, 9))
    assert collides(g, O, (19, 3))


def test_rows_above_top_do_not_collide():
    g = empty_grid()
    vertical_i = I.rotated()
    assert not collides(g, vertical_i, (-3, 0))
    assert collides(g, vertical_i, (-3, -1))


def test_collides_with_locked_cells():
    g = empty_grid()
    g[5][4] = 2
    assert collides(g, O, (4, 3))
    assert not collides(g, O, (4, 5))
    # empty sub-cells of the shape never collide
    t = T
    g2 = empty_grid()
    g2[0][3] = 7
    assert not collides(g2, t, (0, 3))


def test_collides_is_pure():
    g = empty_grid()
    g[10][2] = 3
    before = copy.deepcopy(g)
    results = {collides(g, L, (9, 1)) for _ in range(5)}
    assert results == {True}
    assert g == before
    assert L.shape == ((0,0,1),(1,1,1))


def test_merge_writes_colour_value_on_copies():
    g = empty_grid()
    out = merge(g, O, (18, 3))
    assert not any(any(r) for r in g)
    assert out[18][3:5] == [4, 4]
    assert out[19][3:5] == [4, 4]
    assert out[18] is not g[18] and out[19] is not g[19]
    assert sum(v != 0 for r in out for v in r) == 4


def test_merge_skips_cells_above_grid():
    out = merge(empty_grid(), I.rotated(), (-2, 0))
    assert [out[r][0] for r in range(3)] == [1, 1, 0]


def test_sweep_single_row():
    g = empty_grid()
    g[19] = [1] * COLS
    g[18][0] = 5
    out, n = sweep(g)
    assert n == 1
    assert len(out) == ROWS
    assert out[19][0] == 5 and not any(out[0])
    assert g[19] == [1] * COLS


def test_sweep_rescans_row_after_clear():
    g = empty_grid()
    g[18] = [2] * COLS
    g[19] = [3] * COLS
    g[17][9] = 6
    out, n = sweep(g)
    assert n == 2
    assert out[19][9] == 6
    assert all(not any(r) for r in out[:19])


def test_sweep_keeps_relative_order():
    g = empty_grid()
    g[15][0] = 1
    g[16] = [4] * COLS
    g[17][1] = 2
    g[18] = [5] * COLS
    g[19][2] = 3
    out, n = sweep(g)
    assert n == 2
    assert out[17][0] == 1 and out[18][1] == 2 and out[19][2] == 3
    assert not any(out[0]) and not any(out[1])


def test_sweep_nothing_to_clear():
    g = empty_grid()
    g[19] = [1] * (COLS - 1) + [0]
    out, n = sweep(g)
    assert n == 0
    assert out == g
