# cfsolve

Solutions to a collection of short introductory programming-contest
problems. Each one is available as a plain Python function, and
through a command that reads a problem's input and prints its answer.

## Installation

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## Using the functions

Problems whose input is mostly numbers live in `cfsolve.numeric`;
problems about strings live in `cfsolve.text`.

```python
from cfsolve.numeric import domino_piling, elephant, watermelon
from cfsolve.text import abbreviate, translation

domino_piling(2, 4)         # 4: dominoes that fit on a 2 x 4 board
elephant(12)                # 3: steps of length 1..5 needed to cover 12
watermelon(8)               # True: 8 splits into two even positive parts
abbreviate("localization")  # "l10n"
translation("code", "edoc") # True: the second word is the first reversed
```

Numeric problems (`cfsolve.numeric`): `nearly_lucky` (110A),
`next_round` (158A), `team` (231A), `beautiful_matrix` (263A),
`bits_plus_plus` (282A), `watermelon` (4A), `domino_piling` (50A),
`soldier_and_bananas` (546A), `elephant` (617A),
`vanya_and_fence` (667A), `bear_and_big_brother` (791A),
`wrong_subtraction` (977A).

Text problems (`cfsolve.text`): `petya_and_strings` (112A),
`boy_or_girl` (236A), `stones_on_the_table` (266A),
`capitalize_word` (281A), `helpful_maths` (339A), `translation` (41A),
`word_case` (59A), `abbreviate` (71A), `anton_and_danik` (734A).

Functions raise `ValueError` on input they cannot work with, for
instance `next_round` with a place outside the list of scores, or
`beautiful_matrix` with a matrix that is not 5x5 or holds no one.

## Using the command

The `cfsolve` command takes a problem identifier such as `4A` or
`71A`, reads that problem's input in the usual contest format from
standard input, and writes the answer to standard output:

    cfsolve 71A < input.txt

Identifiers are matched without regard to case. Run `cfsolve --help`
for the list of identifiers it accepts. An unknown identifier or
malformed input makes the command print a message to standard error
and exit with status 1.

The same work is available from Python through `cfsolve.cli.solve`,
which takes a problem identifier and the full input text and returns
the output text:

```python
from cfsolve.cli import solve

solve("4A", "8")   # "YES\n"
```