"""Multiple-choice answer generation for the truck trivia game."""

from pickup_catalog.quiz.choice_generator.choice_generator import (
    ChoiceGenerator,
    generate_choices,
)

__all__ = [
    "ChoiceGenerator",
    "generate_choices",
]
