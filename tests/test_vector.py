import pytest

from idiomkit.vector import IntVector, main


def build(values):
    vec = IntVector()
    for value in values:
        vec.push_back(value)
    return vec


def test_default_is_empty():
    vec = IntVector()
    assert len(vec) == 0
    assert vec.capacity() == 0
    assert list(vec) == []


def test_sized_constructor_fills_value():
    vec = IntVector(3, 7)
    assert list(vec) == [7, 7, 7]
    assert vec.capacity() == 3


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        IntVector(-1)


def test_push_back_capacity_invariants():
    vec = IntVector()
    previous = 0
    for value in range(1, 40):
        vec.push_back(value)
        assert vec.capacity() >= len(vec)
        assert vec.capacity() >= previous
        assert vec.capacity() < 2 * len(vec)
        previous = vec.capacity()
    assert list(vec) == list(range(1, 40))


def test_reserve_never_shrinks_and_at_least_doubles():
    vec = IntVector(3, 0)
    vec.reserve(2)
    assert vec.capacity() == 3
    vec.reserve(4)
    assert vec.capacity() >= 2 * 3
    assert len(vec) == 3


def test_resize_grow_and_shrink():
    vec = build([1, 2, 3])
    vec.resize(5)
    assert list(vec) == [1, 2, 3, 0, 0]
    assert vec.capacity() >= 5
    vec.resize(2)
    assert list(vec) == [1, 2]
    with pytest.raises(ValueError):
        vec.resize(-1)


def test_pop_back_on_empty_is_noop():
    vec = IntVector()
    vec.pop_back()
    assert len(vec) == 0


def test_erase_and_pop_back_example():
    vec = build([1, 2, 5, 7])
    assert vec.erase(0) == 0
    vec.pop_back()
    assert list(vec) == [2, 5]


def test_erase_out_of_range():
    vec = build([1])
    with pytest.raises(IndexError):
        vec.erase(1)


def test_erase_range():
    vec = build([1, 2, 3, 4, 5])
    assert vec.erase_range(1, 3) == 1
    assert list(vec) == [1, 4, 5]
    with pytest.raises(IndexError):
        vec.erase_range(2, 1)
    with pytest.raises(IndexError):
        vec.erase_range(0, 4)


def test_insert_single():
    vec = build([1, 3])
    assert vec.insert(1, 2) == 1
    assert list(vec) == [1, 2, 3]
    vec.insert(3, 4)
    assert list(vec) == [1, 2, 3, 4]
    with pytest.raises(IndexError):
        vec.insert(9, 0)


def test_insert_n():
    vec = build([1, 9])
    assert vec.insert_n(1, 3, 5) == 1
    assert list(vec) == [1, 5, 5, 5, 9]
    assert vec.capacity() >= len(vec)
    with pytest.raises(ValueError):
        vec.insert_n(0, -1, 0)


def test_clear_keeps_capacity():
    vec = build([1, 2, 3])
    cap = vec.capacity()
    vec.clear()
    assert len(vec) == 0
    assert vec.capacity() == cap


def test_indexing():
    vec = build([4, 5, 6])
    vec[1] = 10
    assert vec[1] == 10
    assert vec[-1] == 6
    with pytest.raises(IndexError):
        vec[3]


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "2\n5\n"