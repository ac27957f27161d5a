# drillbook

A collection of small, self-contained programming drills: sorting and
searching algorithms, matrix property checks, number-base conversions,
text patterns, date arithmetic, a calculator that keeps a history, a few
bounded containers and a sorter for a plain-text student database.
It uses only the standard library.

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

| Module | Contents |
| --- | --- |
| `drillbook.sorting` | `exchange_sort`, `bubble_sort`, `selection_sort` (each with `reverse`), `insertion_sort`, `merge_sort`, `bottom_up_merge_sort`, `quick_sort`, `iterative_quick_sort`, `sort_descending`, `sort_strings`, `format_chain` |
| `drillbook.searching` | `linear_search`, `binary_search`, `binary_search_all`, `search_ordered_matrix` |
| `drillbook.matrix` | `identity`, `transpose`, `multiply`, `matrix_power`; the checks `is_identity`, `is_orthogonal`, `is_idempotent`, `is_involutory`, `is_nilpotent`, `is_symmetric`, `is_skew_symmetric`; the reshapes `rotate_anticlockwise`, `reverse_rows`, `spiral`, `snake`; `triangle_sums`, `format_matrix`, `side_by_side`; `NotSquareError` |
| `drillbook.arithmetic` | `gcd`, `lcm`, `factorial`, `combinations`, `permutations`, `pascal_row`, `power`, `fibonacci`, `fibonacci_series`, `fibonacci_between`, `is_fibonacci`, `is_perfect`, `is_prime`, `primes_up_to`, `multiples_of_three`, `factor_pairs`, `second_largest`, `sum_of_cubes`, `extremes`, `swap`, `reverse_number`, `is_palindrome_number`, `digit_sum`, `is_power_of_two`, `single_number`, `unpaired_values`, `intersection`, `reversed_values` |
| `drillbook.radix` | `binary_to_decimal`, `decimal_to_binary`, `decimal_to_octal`, `decimal_to_hex`, `binary_string`, `bitwise_report`, `conversion_table` |
| `drillbook.patterns` | `butterfly`, `floyd`, `hollow_diamond`, `number_pyramid`, `symbol_triangle`, `pascal_triangle`, `pascal_pyramid` (each returns the pattern as one string) |
| `drillbook.text` | `reverse_text`, `is_palindrome`, `word_count`, `describe_sum` |
| `drillbook.dates` | `Age`, `InvalidDateError`, `is_leap_year`, `age_on`, `age_between`, `format_age`, `today_string`, `split_date`, `parse_compact_date`, `parse_digits_date`, `month_number`, `parse_month_day_year` |
| `drillbook.calculator` | `Calculator` with `add`, `subtract`, `multiply`, `divide`, `percentage` and `history`; `main` for the interactive menu |
| `drillbook.containers` | `BoundedQueue`, `BoundedStack`, `LinkedList`, `ContainerFullError`, `ContainerEmptyError` |
| `drillbook.student_records` | `StudentRecord`, `read_records`, `write_records`, `sort_by_roll`, `sort_file`; `main` for the command line |

Sorting functions return a new list and leave their input untouched.
Matrices are lists of rows; operations that need a square matrix raise
`NotSquareError` otherwise.

## Examples

```python
from drillbook.sorting import merge_sort, bubble_sort
from drillbook.matrix import is_symmetric
from drillbook.arithmetic import gcd
from drillbook.radix import decimal_to_hex

merge_sort([12, 7, 11, 5, 6, 2, 8, 10, 1, 15])  # [1, 2, 5, 6, 7, 8, 10, 11, 12, 15]
bubble_sort([3, 1, 2], reverse=True)            # [3, 2, 1]
is_symmetric([[1, 2], [2, 1]])                  # True
gcd(12, 18)                                     # 6
decimal_to_hex(255)                             # 'FF'
```

```python
from drillbook.calculator import Calculator

calc = Calculator()
calc.add(1, 2, 3)     # 6
calc.divide(7, 2)     # (3.5, 1)
calc.history()        # ['1 + 2 + 3 = 6', '7 / 2 = 3.500000 & Remainder = 1']
```

Only the first twenty calculations are kept in the history. `subtract`
with a single number negates it; `divide` and `percentage` raise
`ZeroDivisionError` for a zero divisor or total.

```python
from drillbook.containers import BoundedStack

stack = BoundedStack(capacity=2)
stack.push(1)
stack.push(2)
stack.pop()           # 2
```

Pushing beyond the capacity raises `ContainerFullError`; taking from an
empty container raises `ContainerEmptyError`. A `BoundedQueue` does not
reuse slots as values leave: once full it stays full until it has been
drained and popped once more while empty.

## Command-line tools

An interactive, menu-driven calculator (choose `0` to quit):

```
drillbook-calculator
```

Sort a student database file in place by roll number and list the
names with their roll numbers. Without a path it uses
`Students_Database.txt` in the current directory:

```
drillbook-students path/to/students.txt
```

The database holds twelve fields per record, one per line: serial
number, name, father's name, gender (one character), date of birth,
age, city, department, semester, roll number, GPA and skills. The file
is rewritten through a temporary file in the same directory and then
replaced.

## What it does not do

- `LinkedList` only grows: values can be added at either end and read
  back by iteration, but nodes cannot be removed.
- The containers have no interactive front end; only the calculator and
  the student-database sorter come with commands.
- The student-database sorter sorts by roll number only and does not
  add, edit or remove records.