import random

import pytest

from quizdrill.questions import Question, load_questions
from quizdrill.session import (
    QUESTIONS_PER_QUIZ,
    QuizSession,
    build_session,
    format_question,
    format_wrong,
)


def _small_session():
    return QuizSession(
        [
            Question("first", ("w", "x", "y", "z"), "w"),
            Question("second", ("w", "x", "y", "z"), "y"),
        ]
    )


def test_build_session_draws_distinct_questions_from_bank():
    bank = load_questions()
    session = build_session(bank, QUESTIONS_PER_QUIZ, random.Random(1))
    prompts = [q.prompt for q in session.questions]
    assert len(prompts) == QUESTIONS_PER_QUIZ
    assert len(set(prompts)) == QUESTIONS_PER_QUIZ
    bank_prompts = {q.prompt for q in bank}
    assert set(prompts) <= bank_prompts


def test_build_session_rejects_too_many():
    bank = load_questions()
    with pytest.raises(ValueError):
        build_session(bank, len(bank) + 1, random.Random(1))


def test_build_session_deterministic_for_seed():
    bank = load_questions()
    one = build_session(bank, 10, random.Random(9))
    two = build_session(bank, 10, random.Random(9))
    assert one.questions == two.questions


def test_all_correct_answers():
    session = build_session(load_questions(), QUESTIONS_PER_QUIZ, random.Random(5))
    for question in session.questions:
        assert session.record(question.correct_letter())
    assert session.is_complete()
    assert session.score() == QUESTIONS_PER_QUIZ
    assert session.wrong_indices() == []
    assert session.correction_line().strip() == ""


def test_record_rejects_invalid_letter():
    session = _small_session()
    with pytest.raises(ValueError):
        session.record("E")
    assert session.answers == []


def test_record_rejects_after_completion():
    session = _small_session()
    session.record("A")
    session.record("A")
    with pytest.raises(ValueError):
        session.record("B")


def test_lines_and_wrong_indices():
    session = _small_session()
    assert session.record("A") is True
    assert session.record("B") is False
    assert session.score() == 1
    assert session.wrong_indices() == [1]
    assert session.answer_line() == "A B "
    assert session.correction_line() == "  C "


def test_format_question():
    question = Question("prompt", ("w", "x", "y", "z"), "x")
    assert format_question(3, question) == (
        "Câu 3:\nprompt\n\tA. w\tB. x\tC. y\tD. z\n"
    )


def test_format_wrong():
    question = Question("prompt", ("w", "x", "y", "z"), "x")
    text = format_wrong(2, question, "D")
    assert text.startswith("Câu 2: prompt\n\tA. w\tB. x\tC. y\tD. z\n")
    assert "\tYour answer : D. z\n" in text
    assert text.endswith("\tRight answer: B. x\n")