"""Distractor selection strategies, ordered from most to least plausible."""

from pickup_catalog.quiz.choice_generator.distractor_strategies.base_strategy import (
    DistractorStrategy,
)
from pickup_catalog.quiz.choice_generator.distractor_strategies.other_group_strategy import (
    OtherGroupStrategy,
)
from pickup_catalog.quiz.choice_generator.distractor_strategies.pool_fill_strategy import (
    PoolFillStrategy,
)
from pickup_catalog.quiz.choice_generator.distractor_strategies.same_group_strategy import (
    SameGroupStrategy,
)

__all__ = [
    "DistractorStrategy",
    "OtherGroupStrategy",
    "PoolFillStrategy",
    "SameGroupStrategy",
]
