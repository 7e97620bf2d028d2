import io

import pytest

from idiomkit.colortree import main, max_black_after_removal, parse_input


def test_red_in_middle_of_path():
    assert max_black_after_removal("BRB", [(1, 2), (2, 3)]) == 1


def test_no_red_nodes_gives_zero():
    assert max_black_after_removal("BBB", [(1, 2), (1, 3)]) == 0


def test_single_red_node():
    assert max_black_after_removal("R", []) == 0


def test_edge_order_does_not_matter():
    colors = "BRBBRB"
    edges = [(1, 2), (2, 3), (2, 4), (4, 5), (5, 6)]
    swapped = [(v, u) for u, v in reversed(edges)]
    assert max_black_after_removal(colors, edges) == max_black_after_removal(
        colors, swapped
    )


def test_result_is_non_negative():
    colors = "RRBRB"
    edges = [(1, 2), (2, 3), (3, 4), (4, 5)]
    assert max_black_after_removal(colors, edges) >= 0


def test_empty_tree_rejected():
    with pytest.raises(ValueError):
        max_black_after_removal("", [])


def test_wrong_edge_count_rejected():
    with pytest.raises(ValueError):
        max_black_after_removal("BRB", [(1, 2)])


def test_missing_node_rejected():
    with pytest.raises(ValueError):
        max_black_after_removal("BR", [(1, 3)])


def test_disconnected_rejected():
    with pytest.raises(ValueError):
        max_black_after_removal("BRB", [(1, 2), (2, 1)])


def test_parse_input():
    colors, edges = parse_input("3\nBRB\n1 2\n2 3\n")
    assert colors == "BRB"
    assert edges == [(1, 2), (2, 3)]


def test_parse_input_truncates_colors():
    colors, edges = parse_input("2 BRR 1 2")
    assert colors == "BR"
    assert edges == [(1, 2)]


def test_parse_input_errors():
    with pytest.raises(ValueError):
        parse_input("3")
    with pytest.raises(ValueError):
        parse_input("3 BR 1 2 2 3")
    with pytest.raises(ValueError):
        parse_input("3 BRB 1 2")


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nBRB\n1 2\n2 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1\n"