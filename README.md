# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. As it sorts, the program prints each operation it uses. A
companion checker reads a list of operations and tells whether they sort the
input.

## Operations

| name                | effect                                                    |
|---------------------|-----------------------------------------------------------|
| `sa`, `sb`, `ss`    | swap the top two values of a, b, or both                  |
| `pa`, `pb`          | move the top of b onto a, or the top of a onto b          |
| `ra`, `rb`, `rr`    | rotate a, b, or both upwards (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate a, b, or both downwards (the bottom comes to the top) |

An operation on a single stack does nothing, and is not counted, when that
stack has too few values. The combined operations `ss`, `rr` and `rrr` are
always counted.

## Installing

    pip install .

## Sorting

    push-swap 3 2 5 1 4
    push-swap "3 2 5" 1 4

You can pass numbers as separate arguments or as space-separated strings. Each
number must be a valid 32-bit integer, and no number may appear twice. If
either rule is broken, `Error` is printed on standard error and nothing else
happens. If you pass no arguments, the command does nothing. If the input is
already in order, no operations are printed.

Options choose the algorithm:

- `--simple`: selection sort, O(n²)
- `--medium`: bucket sort over about √n buckets, then pulling back the
  maxima, O(n√n)
- `--complex`: binary radix sort on the rank of each value, O(n log n)
- `--adaptive`: choose from the size and disorder of the input. This is the
  default.
- `--bench`: after sorting, print on standard error the disorder, the
  strategy and a count of every operation.

In adaptive mode the command picks the algorithm as follows:

- six numbers or fewer, or a disorder under 0.2: the simple algorithm
- a disorder under 0.5: the medium algorithm
- otherwise: the complex algorithm

Disorder is the fraction of pairs of values that are out of order.

These cases are errors:

- giving more than one strategy
- giving `--bench` twice
- giving any other option that starts with `--`

## Checking

    push-swap 3 2 1 | push-swap-checker 3 2 1

The checker works like this:

- It takes the numbers as arguments. It accepts no options, so an argument
  starting with `--` is an error.
- It reads one operation per line on standard input and applies each in turn.
- It prints `OK` if stack a ends up sorted and stack b is empty, and `KO`
  otherwise.
- An unknown operation, or a last line without a newline, prints `Error` on
  standard error.

## Using it from Python

```python
from pushswap.stack import Stacks
from pushswap.algorithms import sort_complex

stacks = Stacks([3, 2, 5, 1, 4], show=False, output=None)
sort_complex(stacks)
print(list(stacks.a), stacks.counts.all)
```

The package is split into these modules:

- `pushswap.stack`
  - `Stacks` holds the two stacks as deques, with the top at the left.
  - It has one method per operation, and `apply(name)` runs an operation by
    its name.
  - Operation counts are kept in `counts`, an `OperationCounts`.
  - With `show=True`, each operation is written to `output`, which is
    standard output when none is given.
  - `PushSwapError` is raised for invalid input or an unknown operation.
- `pushswap.parsing`
  - `parse(argv, checker)` returns the values and a `Settings`.
  - The building blocks `split_arguments`, `atoi`, `check_number`,
    `find_strategy` and `parse_values` are also available.
  - `compute_disorder(values)` gives the disorder metric.
- `pushswap.algorithms`
  - `sort_simple`, `sort_medium` and `sort_complex` sort a `Stacks`.
  - `choose_strategy` applies the adaptive rule above.
  - The helpers `find_min`, `find_max` and `rounded_sqrt` are also
    available.
- `pushswap.bench`
  - `format_bench` builds the benchmark report as a string.
  - `print_bench` writes that report to a stream, standard error by default.
- `pushswap.cli`
  - `start_algo` runs the chosen strategy and reports if benchmarking.
  - `run_checker(stacks, lines)` returns `"OK"` or `"KO"`.
  - `main` and `checker_main` are the two commands.