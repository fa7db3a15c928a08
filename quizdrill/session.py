"""A quiz run: the drawn questions, the answers given, and how they score."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from quizdrill.questions import LETTERS, Question

QUESTIONS_PER_QUIZ = 30


@dataclass
class QuizSession:
    """Questions in the order they are asked and the letters answered so far."""

    questions: list[Question]
    answers: list[str] = field(default_factory=list)

    def record(self, letter: str) -> bool:
        """Record the answer to the next question; return whether it is right."""
        if letter not in LETTERS:
            raise ValueError(f"answer must be one of {', '.join(LETTERS)}")
        if self.is_complete():
            raise ValueError("every question has already been answered")
        question = self.questions[len(self.answers)]
        self.answers.append(letter)
        return letter == question.correct_letter()

    def score(self) -> int:
        """Number of answers that match the correct letter."""
        return sum(
            answer == question.correct_letter()
            for question, answer in zip(self.questions, self.answers)
        )

    def is_complete(self) -> bool:
        return len(self.answers) >= len(self.questions)

    def wrong_indices(self) -> list[int]:
        """Indices of answered questions whose answer is wrong."""
        return [
            index
            for index, (question, answer) in enumerate(
                zip(self.questions, self.answers)
            )
            if answer != question.correct_letter()
        ]

    def answer_line(self) -> str:
        """The given letters, each followed by a space."""
        return "".join(f"{answer} " for answer in self.answers)

    def correction_line(self) -> str:
        """The correct letter under each wrong answer, blanks under right ones."""
        return "".join(
            "  " if answer == question.correct_letter()
            else f"{question.correct_letter()} "
            for question, answer in zip(self.questions, self.answers)
        )


def build_session(
    questions: Sequence[Question], count: int, rng: random.Random
) -> QuizSession:
    """Draw ``count`` questions in random order, each with shuffled choices."""
    if count < 0 or count > len(questions):
        raise ValueError(
            f"cannot draw {count} questions from a bank of {len(questions)}"
        )
    pool = list(questions)
    rng.shuffle(pool)
    return QuizSession([q.with_shuffled_choices(rng) for q in pool[:count]])


def _choices_block(question: Question) -> str:
    return "".join(
        f"\t{letter}. {choice}" for letter, choice in zip(LETTERS, question.choices)
    )


def format_question(number: int, question: Question) -> str:
    """Render a numbered question with its lettered choices."""
    return f"Câu {number}:\n{question.prompt}\n{_choices_block(question)}\n"


def format_wrong(number: int, question: Question, given: str) -> str:
    """Render a wrongly answered question with the given and the right answer."""
    right = question.correct_letter()
    return (
        f"Câu {number}: {question.prompt}\n"
        f"{_choices_block(question)}\n"
        f"\tYour answer : {given}. {question.choice_for(given)}\n"
        f"\tRight answer: {right}. {question.answer}\n"
    )