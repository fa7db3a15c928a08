import io
import random
import sys

import pytest

from quizdrill.cli import main, run
from quizdrill.questions import Question, load_questions
from quizdrill.session import QUESTIONS_PER_QUIZ, QuizSession, build_session


def _reader(tokens):
    iterator = iter(tokens)

    def read():
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError from None

    return read


def _small_session():
    return QuizSession(
        [
            Question("first", ("w", "x", "y", "z"), "w"),
            Question("second", ("w", "x", "y", "z"), "y"),
        ]
    )


def test_all_correct_run_reports_full_score():
    session = build_session(load_questions(), QUESTIONS_PER_QUIZ, random.Random(2))
    letters = [q.correct_letter() for q in session.questions]
    out = []
    score = run(session, _reader(letters + ["Q"]), out.append)
    text = "".join(out)
    assert score == QUESTIONS_PER_QUIZ
    assert "result: 30\n" in text
    assert "ĐỀ BÀI:\n" in text


def test_invalid_answer_is_asked_again():
    session = _small_session()
    out = []
    run(session, _reader(["x", "A", "C", "Q"]), out.append)
    text = "".join(out)
    assert text.count("Nhập sai, nhập lại: ") == 1
    assert session.answers == ["A", "C"]
    assert session.score() == 2


def test_summary_lines():
    session = _small_session()
    out = []
    run(session, _reader(["A", "B", "Q"]), out.append)
    text = "".join(out)
    assert "Your answer : A B \n" in text
    assert "Wrong answer:   C \n" in text


def test_wrong_command_shows_corrections():
    session = _small_session()
    out = []
    run(session, _reader(["A", "B", "wrong", "Q"]), out.append)
    text = "".join(out)
    assert "Câu 2: second\n" in text
    assert "\tYour answer : B. x\n" in text
    assert "\tRight answer: C. y\n" in text
    assert "Câu 1: first\n" not in text


def test_question_command_repeats_questions():
    session = _small_session()
    out = []
    run(session, _reader(["A", "C", "question", "Q"]), out.append)
    text = "".join(out)
    assert text.count("Câu 1:\nfirst\n") == 2


def test_eof_raises():
    session = _small_session()
    with pytest.raises(EOFError):
        run(session, _reader(["A"]), lambda text: None)


def test_main_runs_to_quit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("A\n" * QUESTIONS_PER_QUIZ + "Q\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Trả Lời:\n" in captured
    assert "Your answer : " + "A " * QUESTIONS_PER_QUIZ + "\n" in captured


def test_main_returns_error_on_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("A B\n"))
    assert main([]) == 1
    assert "ĐỀ BÀI:" in capsys.readouterr().out