# pushswap

Sorts a list of integers using two stacks, **a** and **b**, and a fixed set of
operations, and prints the operations it performs, one per line.

## Operations

| Name  | Effect                                      |
|-------|---------------------------------------------|
| `sa`  | swap the top two elements of a              |
| `sb`  | swap the top two elements of b              |
| `ss`  | `sa` and `sb` together                      |
| `pa`  | move the top of b onto a                    |
| `pb`  | move the top of a onto b                    |
| `ra`  | rotate a upwards (top goes to the bottom)   |
| `rb`  | rotate b upwards                            |
| `rr`  | `ra` and `rb` together                      |
| `rra` | rotate a downwards (bottom goes to the top) |
| `rrb` | rotate b downwards                          |
| `rrr` | `rra` and `rrb` together                    |

An operation that would change nothing (for example `sa` on a stack with fewer
than two elements) is not performed and not reported.

A three-element stack that is not already in rotated order gets a dedicated
short sequence. Anything else is sorted greedily: the element of a that costs
the fewest rotations is pushed to b until a is in rotated ascending order, then
b is pushed back element by element into place, and finally a is rotated the
shorter way until its smallest value is on top.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3" 87 23
```

Numbers may be given as separate arguments or as space-separated groups inside
one argument. Before the operations, the command prints three diagnostic lines:

```
is a sorted: 0
is a ordered: 0
A: 3 2 1 
```

`is a sorted` is 1 when the input is already ascending, `is a ordered` is 1
when some rotation of it is ascending, and the `A:` line lists the input from
top to bottom. The operations follow, one per line.

An argument that is empty or only whitespace, a token that is not an integer, a
value outside the 32-bit signed range, or a duplicate prints `Error` to
standard error and exits with status 1. With no arguments nothing is printed
and the status is 0.

## Library use

```python
from pushswap.turk import sort_values

operations = sort_values([3, 2, 1])
print(operations)
```

For finer control, build a `pushswap.stack.Machine` with the starting values
and an `on_operation` callback that receives each operation name; every
performed operation is also appended to `Machine.operations`. Pass the machine
to `pushswap.turk.turk` or `pushswap.turk.sort_three`. The cost of moving one
element is given by `pushswap.turk.optimal_move`, which returns a
`pushswap.turk.Move`.

Input checking is done by `pushswap.parsing.validate_args` and
`pushswap.parsing.parse_args`, which raise `pushswap.parsing.ParseError` when
the arguments are invalid.

## Helper modules

The package also carries small helpers that follow C library conventions:

- `pushswap.printf` – `render` and `printf` with the conversions `c`, `s`,
  `d`, `i`, `u`, `x`, `X`, `p` and `%`, raising `FormatError` on failure
- `pushswap.charutil` – ASCII character classes, `toupper`/`tolower`, `atoi`
  and `itoa`
- `pushswap.strutil` – NUL-terminated string functions such as `split`,
  `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `strtrim` and `substr`
- `pushswap.memory` – byte-buffer functions `memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy` and `memmove`
- `pushswap.linkedlist` – `LinkedList` and `Node`, a singly linked list
- `pushswap.fdio` – `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`
  for writing to a text stream

## What it does not do

There is no checker: the package produces operation sequences but does not
read a sequence from input to verify that it sorts a given list.

## Running the tests

```
pip install .[test]
pytest
```