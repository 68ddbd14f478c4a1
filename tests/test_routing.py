import io

import pytest

from netlab.routing import Route, compute_routes, format_routes, main

TRIANGLE = [[0, 2, 7], [2, 0, 1], [7, 1, 0]]
SQUARE = [
    [0, 1, 999, 4],
    [1, 0, 2, 999],
    [999, 2, 0, 3],
    [4, 999, 3, 0],
]


@pytest.mark.parametrize("costs", [TRIANGLE, SQUARE])
def test_tables_are_a_fixed_point(costs):
    routes = compute_routes(costs)
    size = len(costs)
    for i in range(size):
        for j in range(size):
            for k in range(size):
                cost = 0 if i == k else costs[i][k]
                assert routes[i][j].distance <= cost + routes[k][j].distance


@pytest.mark.parametrize("costs", [TRIANGLE, SQUARE])
def test_distances_never_exceed_direct_cost(costs):
    routes = compute_routes(costs)
    for i, table in enumerate(routes):
        for j, route in enumerate(table):
            assert route.destination == j
            if i != j:
                assert route.distance <= costs[i][j]


def test_diagonal_is_forced_to_zero():
    routes = compute_routes([[9, 4], [4, 9]])
    assert routes[0][0] == Route(0, 0, 0)
    assert routes[1][1] == Route(1, 1, 0)


def test_shorter_path_through_neighbour_is_found():
    routes = compute_routes(TRIANGLE)
    assert routes[0][2] == Route(destination=2, next_hop=1, distance=3)


def test_symmetric_costs_give_symmetric_distances():
    routes = compute_routes(SQUARE)
    for i in range(4):
        for j in range(4):
            assert routes[i][j].distance == routes[j][i].distance


def test_unchanged_entries_keep_direct_hop():
    routes = compute_routes([[0, 5], [5, 0]])
    assert routes[0][1] == Route(1, 1, 5)
    assert routes[1][0] == Route(0, 0, 5)


def test_ragged_matrix_is_rejected():
    with pytest.raises(ValueError):
        compute_routes([[0, 1], [1]])


def test_negative_cost_is_rejected():
    with pytest.raises(ValueError):
        compute_routes([[0, -1], [1, 0]])


def test_empty_matrix_gives_no_tables():
    assert compute_routes([]) == []


def test_format_routes_layout():
    text = format_routes(compute_routes([[0, 5], [5, 0]]))
    assert text == (
        "\n\nFor router 1\n"
        "\tnode 1 via 1 Distance 0\tnode 2 via 2 Distance 5"
        "\n\nFor router 2\n"
        "\tnode 1 via 1 Distance 5\tnode 2 via 2 Distance 0"
        "\n\n"
    )


def test_main_reads_matrix_and_prints_tables(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 5\n5 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter the number of nodes: " in out
    assert "For router 2\n" in out
    assert "\tnode 2 via 2 Distance 5" in out


def test_main_reports_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 5\n"))
    assert main([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err