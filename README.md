# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
operations. The `push-swap` command prints the operations that sort stack
`a` in ascending order, one per line.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the two top elements of `a`                |
| `sb`  | swap the two top elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top becomes the bottom       |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom becomes the top     |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

`sa`, `sb`, `pa` and `pb` do nothing, and print nothing, when the stack they
take from is too small.

## Command line

Install the package, then give the numbers as separate arguments or as one
quoted, space-separated argument:

```
push-swap 3 2 1
push-swap "5 4 3 2 1"
```

`python -m pushswap.cli` works the same way.

The first number given is the top of stack `a`. Input that is already
sorted prints nothing. Two numbers are sorted with `sa`; three, four and five
numbers use small dedicated routines; larger inputs are sorted with a binary
radix sort over the ranks of the values.

If an argument holds anything other than digits and signs, a number is
repeated, or a value lies outside the 32-bit signed integer range, the
command writes `Error` to standard error and exits with status 6.

## Library use

```python
import io
from pushswap.stacks import Stacks
from pushswap.sorting import sort_stacks

out = io.StringIO()
stacks = Stacks([3, 1, 2], out)
sort_stacks(stacks, 3)
print(out.getvalue())      # "ra\n"
print(list(stacks.a))      # [1, 2, 3]
print(stacks.operations)   # ["ra"]
```

`Stacks` writes each operation's name to the stream it was given (standard
output when none is) and also keeps the names in `Stacks.operations`.

`pushswap.parsing.parse_arguments` validates command-line style arguments and
returns the numbers, raising `pushswap.parsing.InputError` on bad input.
`pushswap.sorting` also offers `is_sorted`, `rank_indices`, `sort_three`,
`sort_four`, `sort_five` and `radix_sort`.

The package also has general helpers:

- `pushswap.chars`: ASCII classification (`is_alpha`, `is_digit`, ...),
  case conversion, `atoi` and `itoa`.
- `pushswap.strings`: bounded copy and concatenation, searches, `compare_n`,
  `substring`, `trim`, `split` and indexed mapping.
- `pushswap.memory`: zeroing, filling, copying, moving, searching and
  comparing byte buffers.
- `pushswap.linked`: `LinkedList`, a singly linked list.
- `pushswap.output`: `format_printf` and `printf` for the conversions
  `c s p d i u x X %%`, plus `put_char`, `put_str`, `put_endl` and `put_nbr`.
- `pushswap.lines`: `LineReader`, which reads a stream in fixed-size chunks
  and yields it one line at a time.

## Tests

```
pip install -e ".[test]"
pytest
```