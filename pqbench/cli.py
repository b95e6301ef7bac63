"""Interactive menu that runs the queue benchmarks."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator
from typing import TextIO

from pqbench.benchmark import Operation, format_result, run_benchmark

_MENU = (
    "\nWYBIERZ METODE BADAWCZA\n"
    "0. Zakoncz program\n"
    "1. insert(e, p)\n"
    "2. extract_max()\n"
    "3. find_max()\n"
    "4. modify_key(e, p)\n"
    "5. return_size()\n"
    "Twoj wybor: "
)

_CHOICES = {
    1: Operation.INSERT,
    2: Operation.EXTRACT_MAX,
    3: Operation.FIND_MAX,
    4: Operation.MODIFY_KEY,
    5: Operation.RETURN_SIZE,
}


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask_int(prompt: str, tokens: Iterator[str]) -> int:
    print(prompt, end="", flush=True)
    token = next(tokens)
    return int(token)


def main(argv: list[str] | None = None) -> int:
    """Read benchmark parameters, then run the benchmarks chosen from the menu."""
    parser = argparse.ArgumentParser(prog="pqbench", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for the random data")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    tokens = _tokens(sys.stdin)
    try:
        size = _ask_int("Podaj rozmiar struktury: ", tokens)
        samples = _ask_int("Podaj liczbe egzemplarzy: ", tokens)
        operations = _ask_int("Podaj liczbe operacji: ", tokens)
    except StopIteration:
        print("\nBrak danych wejsciowych.", file=sys.stderr)
        return 1
    except ValueError:
        print("\nNieprawidlowa liczba.", file=sys.stderr)
        return 1

    while True:
        print(_MENU, end="", flush=True)
        try:
            token = next(tokens)
        except StopIteration:
            print()
            return 0
        try:
            choice = int(token)
        except ValueError:
            choice = -1

        if choice == 0:
            print("Zakonczono program.")
            return 0
        operation = _CHOICES.get(choice)
        if operation is None:
            print("Nieprawidlowy wybor. Sprobuj ponownie.")
            continue

        print(f"BADANIE {operation.value.upper()}")
        try:
            result = run_benchmark(operation, size, samples, operations, rng)
        except ValueError as exc:
            print(f"Blad: {exc}", file=sys.stderr)
            continue
        print(format_result(operation, result))


if __name__ == "__main__":
    sys.exit(main())