import random

import pytest

from listabench.records import Record
from listabench.sequential import SequentialList

SORTS = [
    "selection_sort",
    "insertion_sort",
    "bubble_sort",
    "shell_sort",
    "quick_sort",
    "merge_sort",
]


def make(*pairs):
    return SequentialList(Record(name, rg) for name, rg in pairs)


def test_insert_first_and_last_order():
    lst = SequentialList()
    lst.insert_last("B", 2)
    lst.insert_first("A", 1)
    lst.insert_last("C", 3)
    assert [r.name for r in lst] == ["A", "B", "C"]


def test_insert_first_moves_shift_every_item():
    lst = make(("a", 1), ("b", 2), ("c", 3))
    metrics = lst.insert_first("z", 9)
    assert metrics.moves == len(lst)
    assert next(iter(lst)) == Record("z", 9)


def test_insert_at_middle():
    lst = make(("a", 1), ("c", 3))
    lst.insert_at("b", 2, 1)
    assert [r.rg for r in lst] == [1, 2, 3]


@pytest.mark.parametrize("pos", [-1, 3])
def test_insert_at_out_of_range(pos):
    lst = make(("a", 1), ("b", 2))
    with pytest.raises(IndexError):
        lst.insert_at("x", 5, pos)


def test_removals():
    lst = make(("a", 1), ("b", 2), ("c", 3), ("d", 4))
    lst.remove_first()
    lst.remove_last()
    assert [r.rg for r in lst] == [2, 3]
    lst.remove_at(1)
    assert [r.rg for r in lst] == [2]


@pytest.mark.parametrize("method", ["remove_first", "remove_last"])
def test_remove_from_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(SequentialList(), method)()


def test_remove_at_out_of_range():
    with pytest.raises(IndexError):
        make(("a", 1)).remove_at(1)


def test_search_found_and_missing():
    lst = make(("a", 5), ("b", 8), ("c", 2))
    found = lst.search(8)
    assert found.position == 1
    assert found.comparisons == 2
    assert lst.search(99) is None


def test_binary_search_on_sorted():
    lst = make(*[(str(i), i * 10) for i in range(20)])
    for index in range(20):
        assert lst.binary_search(index * 10).position == index
    assert lst.binary_search(15) is None
    assert SequentialList().binary_search(1) is None


@pytest.mark.parametrize("method", SORTS)
def test_sorts_order_by_rg(method):
    rng = random.Random(7)
    values = [rng.randint(-50, 50) for _ in range(60)]
    lst = SequentialList(Record(f"n{i}", v) for i, v in enumerate(values))
    metrics = getattr(lst, method)()
    result = list(lst)
    assert [r.rg for r in result] == sorted(values)
    assert sorted(r.name for r in result) == sorted(f"n{i}" for i in range(60))
    assert metrics.comparisons >= 0 and metrics.moves >= 0


@pytest.mark.parametrize("method", SORTS)
def test_sorts_handle_empty_and_single(method):
    empty = SequentialList()
    getattr(empty, method)()
    assert list(empty) == []
    single = make(("a", 3))
    getattr(single, method)()
    assert list(single) == [Record("a", 3)]


@pytest.mark.parametrize("method", ["insertion_sort", "merge_sort", "bubble_sort"])
def test_stable_sorts_keep_equal_keys_in_order(method):
    lst = make(("first", 1), ("x", 0), ("second", 1), ("third", 1))
    getattr(lst, method)()
    assert [r.name for r in lst] == ["x", "first", "second", "third"]


def test_insertion_sort_on_sorted_input_compares_once_per_item():
    lst = make(*[(str(i), i) for i in range(10)])
    metrics = lst.insertion_sort()
    assert metrics.comparisons == len(lst) - 1


def test_save_and_load(tmp_path):
    path = tmp_path / "seq.txt"
    original = make(("Ana", 3), ("Bia", 1))
    original.save(path)
    loaded = make(("old", 99))
    loaded.load(path)
    assert list(loaded) == list(original)


def test_load_missing_file_keeps_contents(tmp_path):
    lst = make(("Ana", 3))
    lst.load(tmp_path / "absent.txt")
    assert list(lst) == [Record("Ana", 3)]