# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of operations. It prints the operations that sort
stack `a` in ascending order, one per line.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the two top elements of `a`                    |
| `sb`  | swap the two top elements of `b`                    |
| `ss`  | `sa` then `sb`                                      |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` then `rb`                                      |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` then `rrb`                                    |

The combined operations `ss`, `rr` and `rrr` announce each of their parts
before their own name, so `ss` prints `sa`, `sb` and `ss`.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, the first being the top of the stack:

```
pushswap 3 2 1
```

or as a single argument holding space-separated numbers:

```
pushswap "4 67 3 87 23"
```

Input rules:

- every value must be an integer within the 32-bit signed range, optionally
  signed and surrounded by whitespace;
- duplicates are rejected;
- an empty argument is rejected.

On invalid input the program writes `Error` and exits with status 255.
A single empty argument is reported on standard output; every other error
goes to standard error. With no arguments, or when the input is already
sorted, nothing is printed and the status is 0.

Up to five numbers are sorted with fixed move sequences; larger inputs use
a binary radix sort on the rank of each value.

## Library use

```python
import io
from pushswap.cli import run

out = io.StringIO()
status = run(["3", "1", "2"], out)
print(status, out.getvalue().split())
```

The building blocks:

- `pushswap.parsing` — `parse_int`, `split_words`, `has_duplicates`, `rank`
  and `build_stack`, which turns argument strings into a ranked `Stack`;
  invalid input raises `ParseError` (a `ValueError`).
- `pushswap.stack` — `Element` (a value and its rank), `Stack` (top first,
  with `swap`, `rotate`, `reverse_rotate`, `push_from`, `is_sorted`,
  `describe` and more) and `Machine`, which holds stacks `a` and `b`,
  applies the named operations, writes each name to its output stream and
  records it in `operations`.
- `pushswap.sort` — `sort_3`, `sort_4`, `sort_5`, `small_sort`,
  `radix_sort` and `sort_all`, which picks the strategy by size.
- `pushswap.fmt` — `format_string` and `ft_printf`, a small printf-style
  formatter for `%c %s %p %d %i %u %x %X %%`.

## Limitations

The package only produces a sequence of operations. It does not include a
tool that reads a sequence of operations and checks whether it sorts a
given input.

## Tests

```
pip install .[test]
pytest
```