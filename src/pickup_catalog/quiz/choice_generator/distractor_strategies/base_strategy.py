import random
from abc import ABC, abstractmethod
from collections.abc import Sequence

from pickup_catalog.quiz.models import CatalogItem


class DistractorStrategy(ABC):
    """Abstract base class for distractor selection strategies."""

    @abstractmethod
    def generate(
        self,
        pool: Sequence[CatalogItem],
        current_index: int,
        num_distractors: int,
        rng: random.Random,
    ) -> list[str]:
        pass

    def _distinct_titles(
        self,
        pool: Sequence[CatalogItem],
        current_index: int,
        same_group: bool | None = None,
    ) -> list[str]:
        """
        Distinct titles at indices other than ``current_index``, excluding the
        correct answer, in first-seen order.

        Args:
            same_group: True keeps only the current item's group, False only
                other groups, None keeps both.
        """
        current = pool[current_index]
        titles: dict[str, None] = {}
        for index, item in enumerate(pool):
            if index == current_index or item.title == current.title:
                continue
            if same_group is not None and (item.group_key == current.group_key) != same_group:
                continue
            titles[item.title] = None
        return list(titles)
