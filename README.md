# labkit

A collection of small command-driven programs. Each one reads a
whitespace-separated script from standard input and writes its answers to
standard output. Every program can also be used from Python.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install .[test]
pytest
```

## Commands

| Command             | Module                | What it does                                                     |
|---------------------|-----------------------|------------------------------------------------------------------|
| `labkit-battle`     | `labkit.battle`       | Suit-and-avenger battle simulation driven by a command script    |
| `labkit-even-paths` | `labkit.even_paths`   | Shortest walk using an even number of corridors (-1 if none)     |
| `labkit-kingdom`    | `labkit.kingdom`      | Tree vertex cover, rank ordering and higher-rank counts          |
| `labkit-islands`    | `labkit.islands`      | Longest chain of distinct neighbouring islands of any shape      |
| `labkit-chess`      | `labkit.chess`        | Board row sorting, inversion counting and closest pair of points |
| `labkit-graph`      | `labkit.graph_ops`    | Graph union, intersection, complement and reachability           |
| `labkit-numbers`    | `labkit.number_tools` | Sorting, Fibonacci mod 1 000 000 007, prime ranges, divisors     |
| `labkit-poly`       | `labkit.polynomials`  | Polynomial multiply (Karatsuba), evaluate and differentiate      |
| `labkit-library`    | `labkit.library`      | Book and member ledger with borrowing and returns                |

Run any of them with the script on standard input:

```
labkit-even-paths < rooms.txt
```

## Input formats

### `labkit-battle`

The counts of spare suits, heroes and enemies; each suit as power,
durability, energy and heat; then each hero and enemy as a name and an
attack strength. An avenger who arrives when no suit is left prints
`<name> is out of fight`. After the word `BattleBegin` come commands until
`End`: `Attack A B`, `Repair NAME X`, `BoostPowerByFactor NAME Y`,
`BoostPower NAME P D E H`, `AvengerStatus NAME`, `Upgrade NAME`,
`PrintBattleLog` and `BattleStatus`. Power is capped at 5000; a suit with
heat above 500 is overheated.

### `labkit-even-paths`

The number of rooms and corridors, the room names, each corridor as two
rooms and a travel time, then the source and destination.

```
3 3
a b c
a b 1
b c 1
a c 5
a c
```

This prints `2`: the route `a → b → c` uses two corridors.

### `labkit-kingdom`

The number of nodes, the roads of the tree as pairs of node numbers, one
`name RANK` line per node (`SENAPATI`, `DANDANAYAKA` or `CHATURANGINI`), then
the number of queries. Query `1` prints the minimum vertex cover, `2` the
sentinel ids ordered by rank and then id, `3 ID` the number of sentinels of
higher rank.

### `labkit-islands`

The number of islands, then each island as `RECTANGLE id` with four
corners, `TRIANGLE id` with three corners, or any other word followed by
`id x y radius` for a circle. It prints `YES` when one chain visits every
island, otherwise `NO` and the chain length, then the island ids of the
longest chain.

### `labkit-chess`

Commands until `END`: `CREATE_2D n` followed by n×n numbers,
`SORT_2D ascending|descending`, `INVERSION_2D`, `DISPLAY_2D` and
`CLOSEST_2D n` followed by n points.

### `labkit-graph`

```
Graph 3 1
0 1
complement
printGraph
isReachable 0 2
end
```

A graph is a label word, the vertex and edge counts, then the edges. The
commands are `union` and `intersection` (each followed by a second graph),
`complement`, `isReachable U V`, `printGraph`, `add_edge U V`,
`remove_edge U V` and `end`. The example prints the complemented adjacency
lists followed by `Yes`.

### `labkit-numbers`

A task number first. Task `1`: lists of integers to sort. Task `2`:
indices whose Fibonacci numbers to print. Task `3`: `printPrimes L R` and
`printPrimeSum L R` queries. Task `4`: `isSquareFree X`, `countDivisors X`
and `sumOfDivisors X` queries.

### `labkit-poly`

The number of queries, each beginning with an operation: `1 TYPE` with two
coefficient lists to multiply (`integer`, `float` or `complex`, a complex
coefficient being two integers), `2 TYPE` with a coefficient list and a
point to evaluate at (`integer`, `float` or `string`), `3 TYPE` with a list
to differentiate (`integer` or `float`). Floats are printed with six
decimals.

### `labkit-library`

Commands until `Done`: `Book TITLE AUTHOR ISBN AVAILABLE TOTAL`,
`Book None`, `Book ExistingBook ISBN NEW_ISBN`, `UpdateCopiesCount ISBN N`,
`Member ID NAME LIMIT`, `Member NoBorrowLimit ID NAME`, `Borrow ID ISBN`,
`Return ID ISBN`, `PrintBook ISBN`, `PrintMember ID` and `PrintLibrary`.
Refused requests print their reason. After a failed lookup the same command
is read again from the tokens that follow.

## Library use

Each module exposes `run_program(text)`, which takes the whole input as a
string and returns the output the command would print, and
`main(argv=None)`, which reads standard input. The pieces underneath are
available directly:

```python
from labkit.even_paths import shortest_even_path
from labkit.number_tools import fibonacci, quick_sort, PrimeCalculator, NumberAnalyzer
from labkit.polynomials import multiply, evaluate, differentiate, ComplexInt
from labkit.graph_ops import Graph
from labkit.chess import Board, closest_pair
from labkit.library import Library, Book, Member, LibraryError

print(fibonacci(10))                          # 55
print(quick_sort([3, 1, 2]))                  # [1, 2, 3]
print(NumberAnalyzer().count_divisors(12))    # 6

g = Graph(3)
g.add_edge(0, 1)
print(g.is_reachable(0, 1))                   # True
```

`shortest_even_path` returns `None` when no even walk exists. Operations in
`labkit.library` that the ledger rejects raise `LibraryError` with the
reason as its message.

## What it does not do

Everything is held in memory for a single run: nothing is saved between
runs, and each command handles exactly one script read from standard input.