# quizdrill

A terminal quiz of aptitude questions: arithmetic word problems, number and
letter sequences, and grid puzzles. The questions are in Vietnamese.

Each run draws 30 questions in random order from the bank and shuffles the
four choices of every question. The whole paper is shown first. You then
answer each question with `A`, `B`, `C` or `D`. Input is read as
whitespace-separated words; any word other than those four letters is
rejected and you are asked again.

## Installation

```
pip install .
```

## Running a quiz

```
quizdrill
```

The command takes no options apart from `--help`.

When all the answers are in, quizdrill prints your score, the letters you
gave and the correct letter for every question you got wrong. After that it
waits for one of these commands:

- `question`: show all the questions again
- `answer`: show the score, your answers and the corrections again
- `wrong`: show each question you missed, with your answer and the right one
- `Q`: quit

Any other word is ignored and the menu is shown again. If input ends before
you quit, the command stops and exits with status 1; after `Q` it exits
with status 0.

## Using it from Python

```python
import random

from quizdrill.questions import load_questions
from quizdrill.session import build_session, format_question

session = build_session(load_questions(), 30, random.Random())
for number, question in enumerate(session.questions, start=1):
    print(format_question(number, question))
```

`load_questions()` returns the bank as a list of `Question` objects, each
with a `prompt`, four `choices` and the `answer` text.
`Question.correct_letter()` gives the letter the answer is listed under,
`Question.choice_for(letter)` the text under a letter, and
`Question.with_shuffled_choices(rng)` a copy with the choices reordered.

`build_session(questions, count, rng)` raises `ValueError` if `count` is
negative or larger than the bank. Give an answer with
`session.record("B")`; it returns whether the answer is right and raises
`ValueError` for a letter other than `A` to `D` or once every question is
answered. Once `session.is_complete()` is true, read the result with
`session.score()`, `session.wrong_indices()`, `session.answer_line()` and
`session.correction_line()`. `format_wrong(number, question, given)` renders
a missed question with the given and the right answer.

`quizdrill.cli.run(session, read, write)` drives the interactive loop with
any input and output callables you pass to it: `read` returns the next word
and raises `EOFError` when input runs out, `write` takes a string. It
returns the score.

## What it does not do

quizdrill keeps nothing between runs: scores and answers are not saved.
The number of questions per quiz (30) and the question bank are fixed, and
the command has no option to change them or to seed the shuffle.

## Running the tests

```
pip install ".[test]"
pytest
```