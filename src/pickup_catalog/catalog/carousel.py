import random
from collections.abc import Sequence

from pickup_catalog.catalog.models import TruckImage
from pickup_catalog.quiz.models import CatalogItem


class Carousel:
    """
    Shuffled, wrap-around sequence of catalog images.

    The image order is fixed once at construction; navigation only moves the
    current index.
    """

    def __init__(self, images: Sequence[TruckImage], rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()
        self.images = list(images)
        self.rng.shuffle(self.images)
        self.index = 0

    def __len__(self) -> int:
        return len(self.images)

    @property
    def current(self) -> TruckImage:
        self._check_not_empty()
        return self.images[self.index]

    def _check_not_empty(self) -> None:
        if not self.images:
            raise IndexError("Carousel is empty.")

    def next(self) -> TruckImage:
        self._check_not_empty()
        self.index = (self.index + 1) % len(self.images)
        return self.current

    def prev(self) -> TruckImage:
        self._check_not_empty()
        self.index = (self.index - 1) % len(self.images)
        return self.current

    def go_to(self, index: int) -> TruckImage:
        if not 0 <= index < len(self.images):
            raise IndexError(f"Slide {index} is out of range for {len(self.images)} images.")
        self.index = index
        return self.current

    def catalog_pool(self) -> list[CatalogItem]:
        """Quiz pool in carousel order, so indices match ``self.index``."""
        return [image.to_catalog_item() for image in self.images]
