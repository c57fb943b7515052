# listabench

listabench keeps a list of people. Each person has a name and an RG number. The list can be stored in two ways, so that you can compare them:

- `listabench.sequential.SequentialList` keeps the records in an array. It can insert and remove at the start, at the end or at a given position. It can search linearly or by binary search. It can sort by RG with selection, insertion, bubble, shell, quick or merge sort.
- `listabench.linked.LinkedList` keeps the records in a singly linked chain of nodes. It has the same insert, remove and linear search operations, but no sorting.

Each operation returns a `listabench.records.Metrics` object. It holds:

- `comparisons`, the number of key comparisons, C(n);
- `moves`, the number of data moves, M(n);
- `elapsed`, the time taken in seconds;
- `position`, the position that was touched, where the operation has one.

`Metrics.report(label)` turns these values into a one-line summary such as `quickSort ⇒ C(n)=3, M(n)=9, tempo=0.000004s`. When a position is set, the summary ends with `, pos=N`.

## Installing

```
pip install .
```

## Interactive use

```
listabench
```

The program first asks which kind of list to use:

- `1` opens the sequential menu.
- Any other answer opens the linked menu.

Each menu has numbered options:

- insert at the start, at the end or at position N;
- remove at the start, at the end or at position N;
- search by RG;
- show the records;
- save and load;
- quit.

The sequential menu also asks whether to search linearly or by binary search, and it has an option for sorting with one of the six algorithms.

After each operation the menu prints the operation's metrics summary. Invalid input prints `Opção invalida`. An out-of-range position prints an `Erro:` line. The menu ends at its exit option or at the end of input.

Records are saved to `seq.txt` (sequential menu) or `enc.txt` (linked menu) in the current directory.

The functions `listabench.menu.sequential_menu(lst, stdin, stdout)` and `listabench.menu.linked_menu(lst, stdin, stdout)` run the same menus on any text streams. `linked_menu` returns the final list, because loading replaces it.

## Use from code

```python
from listabench.sequential import SequentialList
from listabench.linked import LinkedList

seq = SequentialList()
seq.insert_last("Ana", 30)
seq.insert_last("Bruno", 10)
seq.insert_first("Carla", 20)
print(seq.quick_sort().report("quickSort"))
found = seq.binary_search(20)   # Metrics with position 1, or None if absent
seq.save("seq.txt")

enc = LinkedList()
enc.insert_last("Ana", 30)
enc.insert_at("Bruno", 10, 1)
print(enc.search(10).position)  # 1
enc.save("enc.txt")
enc = LinkedList.load("enc.txt")
```

Both classes support `len()` and iteration over their `Record` objects. Each `Record` has a `name` and an `rg`.

Behaviour at the edges:

- `search` and `binary_search` return `None` when no record has the RG.
- `binary_search` expects the list to be sorted by RG.
- `SequentialList` raises `IndexError` for an out-of-range position and for removing from an empty list.
- `LinkedList.insert_at` raises `IndexError` for an out-of-range position.
- `LinkedList.remove_first` and `LinkedList.remove_last` return `None` on an empty list.
- `LinkedList.remove_at` returns `None` when the position is past the end, and raises `IndexError` for a negative position.
- `SequentialList.load` replaces the contents in place. It leaves them unchanged if the file does not exist.
- `LinkedList.load` is a class method that builds a new list. It gives an empty list if the file does not exist.

## File format

Each record is stored on its own line as `name,rg`, for example:

```
Ana,30
Bruno,10
```

`listabench.records.read_records(path)` and `write_records(records, path)` read and write this format. Reading stops at the first entry that does not parse. Names cannot contain commas and are cut to 49 characters.

## Running the tests

```
pip install .[test]
pytest
```