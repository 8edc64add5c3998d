import random
from collections.abc import Sequence
from typing_extensions import override

from pickup_catalog.quiz.choice_generator.distractor_strategies.base_strategy import (
    DistractorStrategy,
)
from pickup_catalog.quiz.models import CatalogItem


class PoolFillStrategy(DistractorStrategy):
    """
    Last-resort tier: every other distinct title in the pool, regardless of
    group, in random order.

    Titles already chosen by earlier strategies are dropped by the generator,
    so this tier only ever tops up the list.
    """

    @override
    def generate(
        self,
        pool: Sequence[CatalogItem],
        current_index: int,
        num_distractors: int,
        rng: random.Random,
    ) -> list[str]:
        candidates = self._distinct_titles(pool, current_index)
        rng.shuffle(candidates)
        return candidates
