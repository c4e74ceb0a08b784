# pushswap

`pushswap` sorts a list of distinct integers with two stacks, `a` and `b`,
and a fixed set of operations. It reports the operations it used, in
order. The aim is a short list of operations, not speed.

## The operations

| Name  | Effect                                                  |
|-------|---------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                        |
| `sb`  | swap the top two elements of `b`                        |
| `ss`  | `sa` and `sb` together                                  |
| `pa`  | move the top of `b` onto `a`                            |
| `pb`  | move the top of `a` onto `b`                            |
| `ra`  | rotate `a` up: the first element becomes the last       |
| `rb`  | rotate `b` up                                           |
| `rr`  | `ra` and `rb` together                                  |
| `rra` | rotate `a` down: the last element becomes the first     |
| `rrb` | rotate `b` down                                         |
| `rrr` | `rra` and `rrb` together                                |

An operation on an empty stack, or on a stack too short for it, changes
nothing. Its name is still reported.

## Sorting

`pushswap.sorter.solve(values)` sorts the input numbers and returns the
list of operation names it used:

- input that is already in ascending order gives an empty list;
- two elements are sorted with a single `sa`;
- three elements go through `sort_three`;
- anything longer goes through `push_swap`. It moves elements to `b` one
  at a time and always picks the move that needs the fewest rotations.
  Then it sorts the three that remain in `a` and inserts every element of
  `b` back into place. Last, it rotates the smallest value to the top.

The values may be ints or strings of decimal digits with an optional sign.
Each must be an integer in the signed 32-bit range, and no value may
appear twice. Input that breaks these rules raises `ValueError`, or
`TypeError` for values that are neither ints nor strings.

```python
from pushswap.sorter import solve

for name in solve(["3", "2", "1"]):
    print(name)
```

To work with the stacks directly, build a `pushswap.stack.Stacks` from the
starting contents of `a` and a writable text stream. If you pass no stream,
it uses standard output. Each operation method (`sa`, `pb`, `rra`, ...)
writes its name to the stream on a line of its own, unless you call it
with `quiet=True`:

```python
import io
from pushswap.stack import Stacks, is_sorted

out = io.StringIO()
stacks = Stacks([2, 1, 3], out)
stacks.sa(False)
stacks.pb(True)          # performed but not reported
print(out.getvalue())    # "sa\n"
```

`stacks.a` and `stacks.b` are lists of `Node` objects, with the top first.
`pushswap.stack` also provides `is_sorted`, `min_node`, `max_node` and
`cheapest_node`. `pushswap.targets` provides the index, target and cost
bookkeeping that the sorter uses: `assign_index`, `mark_cheapest`,
`prepare_a_for_push` and `prepare_b_for_push`.

`pushswap.parse.parse_args(text, delimiter)` splits one string of numbers,
such as `"4 3 2 1"`, into its separate words. It raises `ValueError` when
the string holds no words.

## Helpers

The package also has small text and output helpers:

- `pushswap.text`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strlcat`
- `pushswap.search`: `strlcpy`, `strncmp`, `memcmp`, `strchr`, `strrchr`,
  `memchr`. The search functions return positions, or `None` when nothing
  is found.
- `pushswap.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`
- `pushswap.fmt`: `format_string` and `printf`, for the conversions
  `%c %s %p %d %i %u %x %X %%`
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`. Each
  writes to the stream it is given, or to standard output.

## What it does not do

The package has no command-line program. To get the operations for a list
of numbers, call `parse_args` and `solve` from Python and print the names
yourself. It also has no checker that replays a list of operations against
an input.

## Tests

The tests use pytest. Install it with the `test` extra.