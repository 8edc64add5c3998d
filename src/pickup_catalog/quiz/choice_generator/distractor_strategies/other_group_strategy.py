import random
from collections.abc import Sequence
from typing_extensions import override

from pickup_catalog.quiz.choice_generator.distractor_strategies.base_strategy import (
    DistractorStrategy,
)
from pickup_catalog.quiz.models import CatalogItem


class OtherGroupStrategy(DistractorStrategy):
    """Picks distractors from every group except the current item's."""

    @override
    def generate(
        self,
        pool: Sequence[CatalogItem],
        current_index: int,
        num_distractors: int,
        rng: random.Random,
    ) -> list[str]:
        candidates = self._distinct_titles(pool, current_index, same_group=False)
        rng.shuffle(candidates)
        return candidates
