# drillbox

A collection of small interactive console exercises. Each one asks a few
questions on the terminal and prints an answer. The logic behind each exercise
can also be imported and called as plain functions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `drillbox-calculator` | Reads two numbers and an operator (`+`, `-`, `*`, `/`) and prints the result. It prints nothing for any other operator. |
| `drillbox-day-of-week` | Reads a number from 1 to 7 and names the day. 1 is Sunday. |
| `drillbox-factorial` | Reads a positive number and prints its factorial with the full expansion, for example `3! = 3 x 2 x 1 = 6`. |
| `drillbox-guess-number` | Picks a number from 1 to 100, prints it, then gives hints until you guess it. |
| `drillbox-largest-number` | Reads two numbers and prints the larger one. |
| `drillbox-multiplication-table` | Prints the table of a non-negative number, from 0 to 9. |
| `drillbox-odd-even` | Tells whether a whole number is odd or even. |
| `drillbox-palindrome` | Reverses a line of text and tells whether it is a palindrome. |
| `drillbox-reverse-number` | Reverses the digits of a number with at least three digits. |
| `drillbox-rotate-array` | Reads ten numbers from 0 to 100 and rotates them 1 to 9 steps to the right. |
| `drillbox-sort-array` | Reads five numbers, then prints them as entered and sorted in ascending or descending order. |
| `drillbox-temperature` | Converts a value between Celsius and Fahrenheit. |
| `drillbox-vowel-counter` | Counts the vowels and consonants in a line of text. |

When a command gets input it cannot read as a number, or a value outside the
range it needs, it asks again. If input ends before it has everything it needs,
the command stops with exit status 1.

## Using the functions

```python
from drillbox.calculator import calculate
from drillbox.palindrome import is_palindrome, reverse_word
from drillbox.rotate_array import rotate_right, format_numbers
from drillbox.sort_array import SortMode, sort_numbers
from drillbox.temperature import celsius_to_fahrenheit
from drillbox.vowel_counter import count_letters

calculate(6, 3, "/")                          # 2.0
reverse_word("drillbox")                      # "xobllird"
is_palindrome("level")                        # True
format_numbers(rotate_right([1, 2, 3], 1))    # "[3, 1, 2]"
sort_numbers([3, 1, 2], SortMode.DESCENDING)  # [3, 2, 1]
celsius_to_fahrenheit(100)                    # 212.0
count_letters("hello world")                  # (3, 7)
```

Some behaviour worth knowing:

- `calculate` raises `ValueError` for an unknown operator. `div` follows
  floating-point rules for a zero divisor, so it returns infinity or NaN
  rather than raising.
- `day_name` and `describe_day` raise `ValueError` outside 1 to 7.
  `factorial_expansion` raises `ValueError` for numbers below 1.
  `multiplication_table` raises `ValueError` for negative numbers.
- `parity` returns `"even"` or `"odd"` and raises `TypeError` for anything
  that is not a whole number.
- `reverse_number` returns 0 for numbers that are not positive.
- `rotate_right` returns a new list. Steps of zero or fewer leave the list
  unchanged.
- `sort_numbers` accepts a `SortMode` or its letter, `"a"` or `"d"`.
- `count_letters` counts only ASCII letters. `is_vowel` recognises the
  lower-case vowels `a`, `e`, `i`, `o` and `u`.

Other helpers are `check_guess`, `largest` and `format_array`.