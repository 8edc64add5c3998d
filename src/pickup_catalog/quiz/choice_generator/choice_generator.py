import random
from collections.abc import Sequence

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
from pickup_catalog.quiz.models import CatalogItem, ChoiceSet


class ChoiceGenerator:
    def __init__(
        self,
        strategies: list[DistractorStrategy] | None = None,
        rng: random.Random | None = None,
    ):
        self.strategies = strategies or [
            SameGroupStrategy(),
            OtherGroupStrategy(),
            PoolFillStrategy(),
        ]
        self.rng = rng if rng is not None else random.Random()

    def generate_choices(
        self,
        pool: Sequence[CatalogItem],
        current_index: int,
        num_choices: int = 4,
    ) -> ChoiceSet:
        """
        Build the multiple-choice answers for the item at ``current_index``.

        Args:
            pool: Every item available in the current play-through
            current_index: Index of the pictured item
            num_choices: Maximum number of options, correct answer included

        Returns:
            ChoiceSet holding the correct title and the shuffled options. Small
            or single-group pools yield fewer options rather than an error.

        Raises:
            ValueError: If the pool is empty or the index is out of range.
        """
        if not pool:
            raise ValueError("Cannot generate choices from an empty pool.")
        if not 0 <= current_index < len(pool):
            raise ValueError(
                f"Index {current_index} is out of range for a pool of {len(pool)} items."
            )
        if num_choices < 1:
            raise ValueError("At least one choice is required.")

        correct_answer = pool[current_index].title
        distractors = self.generate_distractors(pool, current_index, num_choices - 1)
        return ChoiceSet(
            correct_answer=correct_answer,
            choices=self._shuffle([correct_answer, *distractors]),
        )

    def generate_distractors(
        self,
        pool: Sequence[CatalogItem],
        current_index: int,
        num_distractors: int,
    ) -> list[str]:
        """Collect distractors from each strategy in turn until enough are found."""

        distractors: list[str] = []
        # Seeding with the correct answer keeps it out of the distractors
        seen: set[str] = {pool[current_index].title}

        for strategy in self.strategies:
            if len(distractors) >= num_distractors:
                break
            generated_distractors = strategy.generate(
                pool=pool,
                current_index=current_index,
                num_distractors=num_distractors - len(distractors),
                rng=self.rng,
            )

            for distractor in generated_distractors:
                if distractor not in seen:
                    distractors.append(distractor)
                    seen.add(distractor)
                if len(distractors) >= num_distractors:
                    break

        return distractors[:num_distractors]

    def _shuffle(self, options: list[str]) -> list[str]:
        shuffled = list(dict.fromkeys(options))
        self.rng.shuffle(shuffled)
        return shuffled


def generate_choices(
    pool: Sequence[CatalogItem],
    current_index: int,
    num_choices: int = 4,
    rng: random.Random | None = None,
) -> ChoiceSet:
    """Shortcut for ``ChoiceGenerator(rng=rng).generate_choices(...)``."""
    return ChoiceGenerator(rng=rng).generate_choices(pool, current_index, num_choices)
