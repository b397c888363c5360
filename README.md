# labworks

A collection of small, self-contained utilities for numbers, text and tiny
interpreted languages. Everything is pure Python with no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `labworks.strtools` | string length, reversal, alternating upper case, character grouping, seeded shuffled concatenation |
| `labworks.means` | geometric mean and exponentiation by squaring, with overflow detection |
| `labworks.substring` | every (possibly overlapping) occurrence of a substring in files, with line and position |
| `labworks.convexity` | polygon convexity check and polynomial evaluation |
| `labworks.kaprekar` | Kaprekar numbers in an arbitrary base |
| `labworks.overprintf` | printf with extra conversions: `%Ro`, `%Zr`, `%Cv`/`%CV`, `%to`/`%TO`, `%mi`/`%mu`/`%md`/`%mf` |
| `labworks.overscanf` | scanf with extra conversions: `%Ro`, `%Zr`, `%Cv`/`%CV` |
| `labworks.bisection` | root finding by bisection |
| `labworks.column_sum` | column addition of non-negative numbers written in a base from 2 to 36 |
| `labworks.finite_fractions` | whether a fraction has a finite representation in a base |
| `labworks.taylor` | re-expansion of a polynomial in powers of `(x - a)` |
| `labworks.bitbase` | base 2^r conversion (r from 1 to 5) using bit operations only |
| `labworks.norms` | the vectors that are longest under each of several norms |
| `labworks.employees` | load, validate and sort employee records |
| `labworks.word_tree` | word frequency binary search tree with an interactive menu |
| `labworks.bracket_tree` | bracket expressions such as `A(B,C(D))` printed as indented trees |
| `labworks.macros` | `#define` substitution backed by a chained hash table |
| `labworks.bitvectors` | interpreter for a small language over 26 bit-vector variables `A`..`Z` |
| `labworks.memcells` | interpreter for assignments, left-to-right arithmetic and `print` over named cells |

## Using it from Python

```python
from labworks.overprintf import oversprintf, to_roman
from labworks.overscanf import oversscanf
from labworks.means import fast_power
from labworks.word_tree import WordTree

print(oversprintf("155 in Roman: %Ro", 155))   # 155 in Roman: CLV
print(to_roman(1124))                          # MCXXIV
print(oversscanf("XIV FF", "%Ro %CV", 16))     # [14, 255]
print(fast_power(2.0, 8))                      # 256.0

tree = WordTree(["b", "a", "b"])
print(tree.count("b"))                         # 2
print(tree.top(1))                             # [('b', 2)]
```

The scanning functions return the converted values as a list; the arguments
after the format are the bases used by `%Cv` and `%CV`.

Errors are reported by raising exceptions: invalid input raises
`ValueError` (or a subclass such as `labworks.overscanf.ScanError`),
arithmetic overflow raises `OverflowError`, and missing files raise
`OSError`. In `labworks.memcells`, `evaluate_expression` raises `KeyError`
for an unknown name and `ZeroDivisionError` for division by zero.

## Commands

Each module can be run as a command.

```
labworks-strtools -l TEXT            # length
labworks-strtools -r TEXT            # reversed
labworks-strtools -u TEXT            # every second character upper-cased
labworks-strtools -n TEXT            # digits, then letters, then the rest
labworks-strtools -c SEED S1 S2 ...  # strings concatenated in seeded random order

labworks-employees INPUT -a OUTPUT   # sort ascending; -d (or /d) for descending
labworks-word-tree FILE SEP [SEP...] # build a word tree, then a menu read from standard input
labworks-bracket-tree INPUT OUTPUT   # one expression per line; both files must already exist
labworks-macros FILE                 # print FILE with #define substitutions applied
labworks-bitvectors PROGRAM [/trace TRACEFILE]   # READ values come from standard input
labworks-memcells PROGRAM
```

Commands that run a demonstration when given no arguments, and take optional
arguments otherwise:

```
labworks-means [NUMBER ...]             # geometric mean of the numbers, and 2^8
labworks-substring [TEXT FILE ...]      # default: "abaa" in file1.txt and file2.txt
labworks-kaprekar [BASE NUMBER ...]
labworks-column-sum [BASE NUMBER ...]
labworks-finite-fractions [BASE NUMBER ...]
labworks-bitbase [NUMBER R]             # default: -9 in base 2^3
labworks-overprintf [OUTPUT_FILE]       # also writes the demonstration lines to the file
labworks-overscanf [INPUT_FILE]         # scans "%Ro %s %d %Zr %CV %Cv %f" from stdin or the file
```

Commands that only run a demonstration:

```
labworks-convexity
labworks-bisection
labworks-taylor
labworks-norms
```