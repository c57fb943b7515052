import pytest

from listabench.linked import LinkedList
from listabench.records import Record


def make(*pairs):
    return LinkedList(Record(name, rg) for name, rg in pairs)


def test_constructor_preserves_order():
    lst = make(("a", 1), ("b", 2), ("c", 3))
    assert [r.rg for r in lst] == [1, 2, 3]
    assert len(lst) == 3


def test_insert_first_and_last():
    lst = LinkedList()
    first = lst.insert_last("B", 2)
    assert first.position == 0
    lst.insert_first("A", 1)
    last = lst.insert_last("C", 3)
    assert [r.name for r in lst] == ["A", "B", "C"]
    assert last.position == len(lst) - 1
    assert last.moves == 2


def test_insert_at_middle_and_end():
    lst = make(("a", 1), ("c", 3))
    metrics = lst.insert_at("b", 2, 1)
    assert metrics.position == 1
    lst.insert_at("d", 4, 3)
    assert [r.rg for r in lst] == [1, 2, 3, 4]


@pytest.mark.parametrize("pos", [-1, 3])
def test_insert_at_out_of_range(pos):
    lst = make(("a", 1), ("b", 2))
    with pytest.raises(IndexError):
        lst.insert_at("x", 9, pos)
    assert [r.rg for r in lst] == [1, 2]


def test_removals():
    lst = make(("a", 1), ("b", 2), ("c", 3), ("d", 4))
    assert lst.remove_first().position == 0
    tail = lst.remove_last()
    assert tail.position == 2
    assert [r.rg for r in lst] == [2, 3]
    lst.remove_at(1)
    assert [r.rg for r in lst] == [2]
    assert len(lst) == 1


def test_remove_last_of_single_item():
    lst = make(("a", 1))
    metrics = lst.remove_last()
    assert list(lst) == []
    assert metrics.moves == 0


@pytest.mark.parametrize("method", ["remove_first", "remove_last"])
def test_remove_from_empty_returns_none(method):
    lst = LinkedList()
    assert getattr(lst, method)() is None
    assert len(lst) == 0


def test_remove_at_past_end_is_ignored():
    lst = make(("a", 1), ("b", 2))
    assert lst.remove_at(2) is None
    assert [r.rg for r in lst] == [1, 2]


def test_remove_at_negative_raises():
    with pytest.raises(IndexError):
        make(("a", 1)).remove_at(-1)


def test_search():
    lst = make(("a", 5), ("b", 8), ("c", 2))
    found = lst.search(2)
    assert found.position == 2
    assert found.comparisons == found.position + 1
    assert lst.search(42) is None


def test_save_and_load(tmp_path):
    path = tmp_path / "enc.txt"
    original = make(("Ana", 3), ("Bia", 1), ("Caio", 7))
    original.save(path)
    loaded = LinkedList.load(path)
    assert list(loaded) == list(original)
    assert len(loaded) == len(original)


def test_load_missing_file_gives_empty(tmp_path):
    loaded = LinkedList.load(tmp_path / "absent.txt")
    assert list(loaded) == []