"""Interactive numeric menus for the sequential and linked record lists."""

from __future__ import annotations

import dataclasses
import re
import sys
from collections.abc import Callable
from typing import TextIO

from listabench.linked import LinkedList
from listabench.records import NAME_LIMIT, Metrics, format_record
from listabench.sequential import SequentialList

SEQUENTIAL_FILE = "seq.txt"
LINKED_FILE = "enc.txt"

_INTEGER = re.compile(r"[+-]?\d+")
_WORD = re.compile(r"\S+")

_SEQUENTIAL_MENU = (
    "\nMenu Sequencial:\n"
    " 1) Inserir inicio\n"
    " 2) Inserir fim\n"
    " 3) Inserir N\n"
    " 4) Remover inicio\n"
    " 5) Remover fim\n"
    " 6) Remover N\n"
    " 7) Buscar RG\n"
    " 8) Ordenar\n"
    " 9) Mostrar\n"
    "10) Salvar\n"
    "11) Carregar\n"
    "12) Sair\n"
    ">> "
)

_SORT_MENU = (
    "Algoritmos de Ordenação:\n"
    " 1) Selection\n"
    " 2) Insertion\n"
    " 3) Bubble\n"
    " 4) Shell\n"
    " 5) Quick\n"
    " 6) Merge\n"
    ">> "
)

_LINKED_MENU = (
    "\nMenu Encadeada:\n"
    " 1) Inserir inicio\n"
    " 2) Inserir fim\n"
    " 3) Inserir N\n"
    " 4) Remover inicio\n"
    " 5) Remover fim\n"
    " 6) Remover N\n"
    " 7) Buscar RG\n"
    " 8) Mostrar\n"
    " 9) Salvar\n"
    "10) Carregar\n"
    "11) Sair\n"
    ">> "
)

_INVALID = "Opção invalida\n"

_SORTS: dict[int, tuple[str, Callable[[SequentialList], Metrics]]] = {
    1: ("selectionSort", SequentialList.selection_sort),
    2: ("insertionSort", SequentialList.insertion_sort),
    3: ("bubbleSort", SequentialList.bubble_sort),
    4: ("shellSort", SequentialList.shell_sort),
    5: ("quickSort", SequentialList.quick_sort),
    6: ("mergeSort", SequentialList.merge_sort),
}


class _Console:
    """Prompted, whitespace-separated reading from a text stream."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._buffer = ""

    def say(self, text: str) -> None:
        self._stdout.write(text)

    def report(self, metrics: Metrics | None, label: str) -> None:
        if metrics is not None:
            self.say(metrics.report(label) + "\n")

    def _skip_space(self) -> None:
        self._stdout.flush()
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            line = self._stdin.readline()
            if not line:
                raise EOFError("input exhausted")
            self._buffer = line

    def ask_int(self, prompt: str = "") -> int:
        """Read the next integer; a malformed word is consumed and ValueError raised."""
        self.say(prompt)
        self._skip_space()
        match = _INTEGER.match(self._buffer)
        if match is None:
            bad = _WORD.match(self._buffer)
            self._buffer = self._buffer[bad.end():]
            raise ValueError(f"not an integer: {bad.group()!r}")
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def ask_name(self, prompt: str = "") -> str:
        """Read up to the end of the line, at most the name limit in characters."""
        self.say(prompt)
        self._skip_space()
        line = self._buffer.split("\n", 1)[0].rstrip("\r")
        name = line[:NAME_LIMIT]
        self._buffer = self._buffer[len(name):]
        return name


def _without_position(metrics: Metrics | None) -> Metrics | None:
    return None if metrics is None else dataclasses.replace(metrics, position=None)


def _run_sequential(lst: SequentialList, console: _Console, op: int) -> None:
    if op == 1:
        name = console.ask_name("Nome? ")
        rg = console.ask_int("RG? ")
        console.report(_without_position(lst.insert_first(name, rg)), "inserirInicioSeq")
    elif op == 2:
        name = console.ask_name("Nome? ")
        rg = console.ask_int("RG? ")
        console.report(_without_position(lst.insert_last(name, rg)), "inserirFimSeq")
    elif op == 3:
        pos = console.ask_int("Pos? ")
        name = console.ask_name("Nome? ")
        rg = console.ask_int("RG? ")
        console.report(_without_position(lst.insert_at(name, rg, pos)), "inserirPosicaoSeq")
    elif op == 4:
        console.report(_without_position(lst.remove_first()), "removerInicioSeq")
    elif op == 5:
        console.report(_without_position(lst.remove_last()), "removerFimSeq")
    elif op == 6:
        pos = console.ask_int("Pos? ")
        console.report(_without_position(lst.remove_at(pos)), "removerPosicaoSeq")
    elif op == 7:
        rg = console.ask_int("RG? ")
        mode = console.ask_int("1) Sequencial  2) Binária\n>> ")
        if mode == 1:
            label, found = "buscarSeq", lst.search(rg)
        else:
            label, found = "buscarBinSeq", lst.binary_search(rg)
        if found is None:
            console.say(f"{label}: não encontrado\n")
        else:
            console.report(_without_position(found), label)
    elif op == 8:
        choice = console.ask_int(_SORT_MENU)
        if choice in _SORTS:
            label, sort = _SORTS[choice]
            console.report(_without_position(sort(lst)), label)
        else:
            console.say(_INVALID)
    elif op == 9:
        console.say("".join(format_record(record) + "\n" for record in lst))
    elif op == 10:
        lst.save(SEQUENTIAL_FILE)
    elif op == 11:
        lst.load(SEQUENTIAL_FILE)
    else:
        console.say(_INVALID)


def _run_linked(lst: LinkedList, console: _Console, op: int) -> LinkedList:
    if op == 1:
        name = console.ask_name("Nome? ")
        rg = console.ask_int("RG? ")
        console.report(lst.insert_first(name, rg), "inserirInicioEnc")
    elif op == 2:
        name = console.ask_name("Nome? ")
        rg = console.ask_int("RG? ")
        console.report(lst.insert_last(name, rg), "inserirFimEnc")
    elif op == 3:
        pos = console.ask_int("Pos? ")
        name = console.ask_name("Nome? ")
        rg = console.ask_int("RG? ")
        console.report(lst.insert_at(name, rg, pos), "inserirPosicaoEnc")
    elif op == 4:
        console.report(lst.remove_first(), "removerInicioEnc")
    elif op == 5:
        console.report(lst.remove_last(), "removerFimEnc")
    elif op == 6:
        pos = console.ask_int("Pos? ")
        console.report(lst.remove_at(pos), "removerPosicaoEnc")
    elif op == 7:
        rg = console.ask_int("RG? ")
        found = lst.search(rg)
        if found is None:
            console.say("buscarEnc: nao encontrado\n")
        else:
            console.report(found, "buscarEnc")
    elif op == 8:
        console.say("".join(format_record(record) + "\n" for record in lst))
    elif op == 9:
        lst.save(LINKED_FILE)
    elif op == 10:
        return LinkedList.load(LINKED_FILE)
    else:
        console.say(_INVALID)
    return lst


def sequential_menu(
    lst: SequentialList, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> SequentialList:
    """Run the sequential-list menu until option 12 or end of input."""
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    while True:
        try:
            op = console.ask_int(_SEQUENTIAL_MENU)
            if op == 12:
                console.say("Saindo...\n")
                break
            _run_sequential(lst, console, op)
        except EOFError:
            break
        except ValueError:
            console.say(_INVALID)
        except IndexError as exc:
            console.say(f"Erro: {exc}\n")
    return lst


def linked_menu(
    lst: LinkedList, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> LinkedList:
    """Run the linked-list menu until option 11 or end of input; return the final list."""
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    while True:
        try:
            op = console.ask_int(_LINKED_MENU)
            if op == 11:
                console.say("Saindo...\n")
                break
            lst = _run_linked(lst, console, op)
        except EOFError:
            break
        except ValueError:
            console.say(_INVALID)
        except IndexError as exc:
            console.say(f"Erro: {exc}\n")
    return lst


def main(argv: list[str] | None = None) -> int:
    """Ask which list to manipulate and run its menu."""
    console = _Console(sys.stdin, sys.stdout)
    console.say("\nEscolha uma das opções para manipular sua lista:\n")
    try:
        choice = console.ask_int("1) Sequencial\n2) Encadeada\n>> ")
    except (EOFError, ValueError):
        choice = None
    if choice == 1:
        sequential_menu(SequentialList(), sys.stdin, sys.stdout)
    else:
        linked_menu(LinkedList(), sys.stdin, sys.stdout)
    return 0