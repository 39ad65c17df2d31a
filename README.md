# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small set
of operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both (top goes to bottom) |
| `rra`, `rrb`, `rrr` | reverse rotate `a`, `b`, or both (bottom goes to top) |

An operation on a stack too small for it does nothing: a swap or rotation
needs at least two elements, and a push needs a non-empty source stack.

The numbers start on stack `a`, with the first argument on top. The goal is to
finish with every number on `a` in ascending order and `b` empty.

## Installation

```
pip install .
```

## Producing a solution

```
push-swap 3 1 2
```

prints one operation per line, in the order to apply them. An already sorted
input prints nothing. Each argument must be an optional `+` or `-` followed by
decimal digits, within the 32-bit signed range, and no two arguments may denote
the same number. Otherwise the command prints `Error` to standard error and
exits with status 1. With no arguments the command does nothing.

## Checking a solution

```
push-swap 3 1 2 | pushswap-checker 3 1 2
```

`pushswap-checker` reads operations from standard input, one per line, applies
them to the numbers given as arguments and prints `OK` if stack `a` ends up
sorted with `b` empty, or `KO` otherwise. Every line, the last one included,
must be an operation name followed by a newline. An unknown operation, or
invalid numbers, prints `Error` to standard error and exits with status 1.
With no arguments the command exits at once without reading its input.

## Library use

```python
from pushswap.parsing import build_stack, validate
from pushswap.sorter import Solver, sort_values
from pushswap.checker import run_checker

args = ["3", "1", "2"]
validate(args)
operations = Solver(build_stack(args)).solve()

print(sort_values([3, 1, 2]))           # [<Operation.RA: 'ra'>]
print(run_checker(args, ["ra\n"]))      # OK
```

- `pushswap.stack` — `Node` and `Stack`, the stack with its primitive moves
  (`swap`, `push_from`, `rotate`, `reverse_rotate`) and queries (`is_sorted`,
  `max_index`, `values`).
- `pushswap.parsing` — `validate`, `build_stack`, `parse_long`, `is_digits`,
  `has_duplicates`, and `InputError`, raised for unacceptable input.
- `pushswap.operations` — the `Operation` enum, `apply` to run one operation on
  a pair of stacks, and `parse_operation` to read one from a line of text.
- `pushswap.sorter` — `Solver`, whose `solve` sorts stack `a` and returns the
  operations made; `sort_values` and `assign_indices`.
- `pushswap.checker` — `run_checker`, returning `"OK"` or `"KO"`.

## Running the tests

```
pip install .[test]
pytest
```