import logging
import math
import time
import uuid
from collections import OrderedDict
from collections.abc import Callable

from pickup_catalog.catalog.carousel import Carousel
from pickup_catalog.catalog.models import TruckImage
from pickup_catalog.quiz.choice_generator.choice_generator import ChoiceGenerator
from pickup_catalog.quiz.models import AnswerResult, ChoiceSet, QuizOptions
from pickup_catalog.quiz.quiz_exception import (
    EmptyPoolError,
    QuizFinishedError,
    SessionNotFoundError,
)

log = logging.getLogger(__name__)


class QuizSession:
    """
    One play-through of the "what model is this?" game.

    The session walks the carousel: each answer advances to the next image and
    a fresh ChoiceSet is generated for it, until ``questions_per_game``
    questions have been answered.
    """

    def __init__(
        self,
        carousel: Carousel,
        options: QuizOptions | None = None,
        generator: ChoiceGenerator | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if not len(carousel):
            raise EmptyPoolError()
        self.id = uuid.uuid4().hex
        self.carousel = carousel
        self.options = options or QuizOptions()
        self.generator = generator or ChoiceGenerator(rng=carousel.rng)
        self.clock = clock

        self.score = 0
        self.questions_answered = 0
        self.finished = False
        self.last_result: AnswerResult | None = None
        self.choice_set: ChoiceSet | None = None
        self._question_started_at = 0.0

    @property
    def current_image(self) -> TruckImage:
        return self.carousel.current

    @property
    def question_number(self) -> int:
        return self.questions_answered + 1

    def start(self) -> ChoiceSet:
        """Reset the score and ask about the current image."""
        self.score = 0
        self.questions_answered = 0
        self.finished = False
        self.last_result = None
        log.info("Quiz session %s started with %d images", self.id, len(self.carousel))
        return self._new_question()

    def time_left(self) -> int:
        """Seconds left on the countdown, rounded up so it reads 0 only once expired."""
        if self.finished:
            return 0
        remaining = self.options.seconds_per_question - self._elapsed()
        return max(0, math.ceil(remaining))

    def timed_out(self) -> bool:
        return self._elapsed() >= self.options.seconds_per_question

    def _elapsed(self) -> float:
        return self.clock() - self._question_started_at

    def answer(self, choice: str | None) -> AnswerResult:
        """
        Score ``choice`` against the current question and move on.

        ``None``, or any answer given after the countdown ran out, counts as a
        time-out.

        Raises:
            QuizFinishedError: If the game is already over.
        """
        if self.finished or self.choice_set is None:
            raise QuizFinishedError(self.questions_answered)

        timed_out = choice is None or self.timed_out()
        selected = None if timed_out else choice
        is_correct = selected == self.choice_set.correct_answer
        if is_correct:
            self.score += 1
        self.questions_answered += 1
        self.finished = self.questions_answered >= self.options.questions_per_game

        result = AnswerResult(
            selected=selected,
            correct_answer=self.choice_set.correct_answer,
            is_correct=is_correct,
            timed_out=timed_out,
            score=self.score,
            questions_answered=self.questions_answered,
            finished=self.finished,
        )
        self.last_result = result

        if self.finished:
            log.info(
                "Quiz session %s finished: %d/%d",
                self.id,
                self.score,
                self.questions_answered,
            )
            self.choice_set = None
        else:
            self.carousel.next()
            self._new_question()
        return result

    def _new_question(self) -> ChoiceSet:
        self.choice_set = self.generator.generate_choices(
            self.carousel.catalog_pool(),
            self.carousel.index,
            self.options.num_choices,
        )
        self._question_started_at = self.clock()
        return self.choice_set


class QuizSessionRegistry:
    """In-memory sessions by id; the oldest session is dropped past ``max_sessions``."""

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, QuizSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def add(self, session: QuizSession) -> QuizSession:
        self._sessions[session.id] = session
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            log.debug("Evicted quiz session %s", evicted_id)
        return session

    def get(self, session_id: str) -> QuizSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
