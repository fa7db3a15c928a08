"""Interactive command: take the quiz, see the score, review the answers."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterable, Iterator

from quizdrill.questions import LETTERS, load_questions
from quizdrill.session import (
    QUESTIONS_PER_QUIZ,
    QuizSession,
    build_session,
    format_question,
    format_wrong,
)

LINE = "=" * 92
THIN_LINE = "-" * 92
MENU = (
    '"Q" to quit, "answer" to show anwer, "question" to show question, '
    '"wrong" to show wrong\n'
)


def _show_questions(session: QuizSession, write: Callable[[str], object]) -> None:
    for number, question in enumerate(session.questions, start=1):
        write(THIN_LINE + "\n")
        write(format_question(number, question))


def _show_results(session: QuizSession, write: Callable[[str], object]) -> None:
    write(f"result: {session.score()}\n")


def run(
    session: QuizSession,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> int:
    """Ask every question, report the score, then serve the review menu.

    ``read`` returns the next whitespace-free token and raises EOFError when
    input runs out. Returns the score.
    """
    write(LINE + "\n")
    write("ĐỀ BÀI:\n")
    _show_questions(session, write)

    write("\n" + LINE + "\n")
    write("Trả Lời:\n")
    for number in range(len(session.answers) + 1, len(session.questions) + 1):
        write(THIN_LINE + "\n")
        write(f"Câu {number}: ")
        answer = read()
        while answer not in LETTERS:
            write("Nhập sai, nhập lại: ")
            answer = read()
        session.record(answer)

    write("\n" + LINE + "\n")
    _show_results(session, write)
    write("Your answer : " + session.answer_line() + "\n")
    write("Wrong answer: " + session.correction_line() + "\n")

    command = ""
    while command != "Q":
        write("\n" + LINE + "\n")
        write(MENU)
        command = read()
        if command == "question":
            _show_questions(session, write)
        elif command == "answer":
            write(LINE + "\n")
            _show_results(session, write)
            write(session.answer_line() + "\n")
            write(session.correction_line() + "\n")
        elif command == "wrong":
            for index in session.wrong_indices():
                write(THIN_LINE + "\n")
                write(
                    format_wrong(
                        index + 1, session.questions[index], session.answers[index]
                    )
                )
    return session.score()


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Run a quiz of randomly drawn questions on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="quizdrill", description="Take a multiple-choice quiz."
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("input ended") from None

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    session = build_session(load_questions(), QUESTIONS_PER_QUIZ, random.Random())
    try:
        run(session, read, write)
    except EOFError:
        write("\n")
        return 1
    return 0