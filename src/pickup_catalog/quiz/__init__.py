"""Truck trivia: multiple-choice generation and game sessions."""

from pickup_catalog.quiz.models import AnswerResult, CatalogItem, ChoiceSet, QuizOptions
from pickup_catalog.quiz.choice_generator.choice_generator import (
    ChoiceGenerator,
    generate_choices,
)
from pickup_catalog.quiz.quiz_exception import (
    EmptyPoolError,
    QuizError,
    QuizFinishedError,
    SessionNotFoundError,
)
from pickup_catalog.quiz.quiz_session import QuizSession, QuizSessionRegistry

__all__ = [
    "AnswerResult",
    "CatalogItem",
    "ChoiceGenerator",
    "ChoiceSet",
    "EmptyPoolError",
    "QuizError",
    "QuizFinishedError",
    "QuizOptions",
    "QuizSession",
    "QuizSessionRegistry",
    "SessionNotFoundError",
    "generate_choices",
]
