# algodrills

This is a small library of classic algorithm exercises. Each one is a plain
Python function or class that takes its input as arguments and returns its
result. The library has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.dynamic`

- `min_cost_recursive(cost, i, j)` gives the cheapest path cost from cell
  `(0, 0)` to cell `(i, j)` of a cost grid. The path may only move right or
  down. This version uses plain recursion.
- `min_cost_memo(cost)` and `min_cost_bottom_up(cost)` give the same cost for
  the path from the top-left cell to the bottom-right cell. The first works
  top-down with memoisation and the second fills a table. Both raise
  `ValueError` for an empty grid.
- `wine_profit_recursive(wines)`, `wine_profit_memo(wines)` and
  `wine_profit_bottom_up(wines)` give the best total from selling a row of
  wines. One wine is sold each year, taken from either end of the row, and it
  sells for its price times the year.

```python
from algodrills.dynamic import min_cost_bottom_up

min_cost_bottom_up([[1, 2, 1], [3, 2, 1], [1, 0, 1]])  # 5
```

### `algodrills.numbers`

- `mod_pow(base, exp)` computes a power modulo 1 000 000 007. It raises
  `ValueError` for a negative exponent.
- `mod_inverse(n)` gives the modular inverse of `n` by Fermat's little theorem.
- `is_smaller(a, b)`, `add_strings(a, b)`, `subtract_strings(a, b)` and
  `multiply_strings(a, b)` do exact arithmetic on signed decimal strings. Any
  string that is not a decimal integer raises `ValueError`.
- `evaluate_polynomial(x)` evaluates 4x³ + 5x² − 6x + 14 exactly, for a decimal
  string `x`, and returns the result as a string.
- `find_digits(n)` counts the non-zero digits of `n` that divide `n`.

```python
from algodrills.numbers import evaluate_polynomial, mod_inverse, multiply_strings

mod_inverse(2)              # 500000004
multiply_strings("-12", "34")  # "-408"
evaluate_polynomial("2")    # "54"
```

### `algodrills.patterns`

Each function takes a size `n` and returns the pattern as a list of lines,
without newlines. The functions are `hourglass`, `inverted_hourglass`, `magic`,
`mountain`, `numbers_and_stars`, `numbers_and_stars_ascending`,
`number_ladder`, `rhombus`, `triangle` and `with_zeros`. Some patterns separate
their entries with spaces and others with tabs.

```python
from algodrills.patterns import number_ladder

number_ladder(3)  # ["1\t", "2\t3\t", "4\t5\t6\t"]
```

### `algodrills.arrays`

- `target_sum_pairs(values, target)` returns the pairs of elements that sum to
  `target`. `target_sum_triplets(values, target)` does the same for triplets.
  Results are tuples in ascending order.
- `array_manipulation(n, queries)` applies the 1-based, inclusive range
  additions `(a, b, k)` to an array of `n` zeros and returns the largest value.
- `birthday_cake_candles(heights)` counts how many candles share the tallest
  height.
- `breaking_records(scores)` returns a tuple of two counts: how often the high
  score was raised, and how often the low score was lowered.
- `flatland_space_stations(n, stations)` gives the greatest distance from any
  city to its nearest station. Cities are numbered from 0.
- `rotate_left(values, d)` returns a copy of `values` rotated `d` places to the
  left.
- `minimum_swaps(values)` gives the fewest swaps needed to sort a permutation
  of 1..n.
- `ransom_note(magazine, ransom)` tells whether the words of the note can be
  taken from the magazine, using each magazine word at most once.

### `algodrills.sorting`

- `bubble_sort_swaps(values)` counts the swaps that bubble sort makes.
- `merge_sort_inversions(values)` returns a tuple: a sorted copy of `values` and
  the number of inversions.
- `minimum_bribes(queue)`, `minimum_bribes_bubble(queue)` and
  `minimum_bribes_merge(queue)` solve the "New Year chaos" queue puzzle. If
  someone in the queue must have bribed more than two people, they raise
  `TooChaoticError`, a subclass of `ValueError`.
- `permutations(text)` returns every ordering of a string. It builds them by
  inserting each next character at every position.

```python
from algodrills.sorting import TooChaoticError, minimum_bribes

minimum_bribes([2, 1, 5, 3, 4])  # 3
try:
    minimum_bribes([2, 5, 1, 3, 4])
except TooChaoticError:
    print("Too chaotic")
```

### `algodrills.linked_list`

`LinkedList` is a singly linked list made of `Node` objects. You can build one
empty, or from any iterable. It supports `len()` and iteration.

Methods:

- Insertion and deletion: `insert_at_front`, `insert_at_end`,
  `delete_from_front`, `delete_from_end`, `insert_at_pos` and `delete_from_pos`.
  The delete methods return the value they removed, or `None` if the list is
  empty.
- Searching: `find` and `mid_point`.
- Reordering in place: `reverse`, `reverse_sublist(start, finish)` (1-based and
  inclusive), `bubble_sort`, `merge_sort`, and `separate_odd_even`, which moves
  the odd values behind the even ones.

Module-level helpers:

- `merge_sorted(first, second)` merges two sorted sequences into a new
  `LinkedList`.
- `sum_of_lists(first, second)` adds two numbers given as digit sequences,
  most significant digit first.
- `has_cycle(head)`, `create_cycle(head)` and `break_cycle(head)` work on a
  chain of `Node`s. `create_cycle` links the last node back to the third node.
  `break_cycle` returns whether it found a cycle to cut.

```python
from algodrills.linked_list import LinkedList, create_cycle, has_cycle, break_cycle

items = LinkedList([5, 4, 3, 2, 1])
items.merge_sort()
list(items)  # [1, 2, 3, 4, 5]

create_cycle(items.head)
has_cycle(items.head)    # True
break_cycle(items.head)  # True
list(items)              # [1, 2, 3, 4, 5]
```

## What it does not do

The package has no command-line programs and does not read standard input or
print anything. The patterns come back as lists of strings, and the results of
the other exercises come back as return values. Displaying them is left to the
caller.