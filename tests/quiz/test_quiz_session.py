import random
from collections.abc import Callable

import pytest

from pickup_catalog.catalog.carousel import Carousel
from pickup_catalog.catalog.models import TruckImage
from pickup_catalog.quiz.models import QuizOptions
from pickup_catalog.quiz.quiz_exception import (
    EmptyPoolError,
    QuizFinishedError,
    SessionNotFoundError,
)
from pickup_catalog.quiz.quiz_session import QuizSession, QuizSessionRegistry


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def carousel(make_image: Callable[..., TruckImage]) -> Carousel:
    images = [
        make_image("Tacoma", "Toyota", "a1"),
        make_image("Hilux", "Toyota", "a2"),
        make_image("Ranger", "Ford", "a3"),
        make_image("Courier", "Ford", "a4"),
        make_image("S-10", "Chevrolet", "a5"),
    ]
    return Carousel(images, rng=random.Random(11))


class TestQuizSession:
    """Test a play-through of the trivia game."""

    def test_start_asks_about_the_current_image(self, carousel: Carousel) -> None:
        # Given
        session = QuizSession(carousel, clock=FakeClock())

        # When
        choice_set = session.start()

        # Then
        assert choice_set.correct_answer == carousel.current.truck_title
        assert len(choice_set.choices) == 4
        assert session.question_number == 1
        assert session.time_left() == 15

    def test_correct_answer_scores_and_advances(self, carousel: Carousel) -> None:
        # Given
        session = QuizSession(carousel, clock=FakeClock())
        first = session.start()
        first_index = carousel.index

        # When
        result = session.answer(first.correct_answer)

        # Then
        assert result.is_correct
        assert not result.timed_out
        assert result.score == 1
        assert result.questions_answered == 1
        assert carousel.index == (first_index + 1) % len(carousel)
        assert session.choice_set is not None
        assert session.choice_set.correct_answer == carousel.current.truck_title

    def test_wrong_answer_does_not_score(self, carousel: Carousel) -> None:
        # Given
        session = QuizSession(carousel, clock=FakeClock())
        choice_set = session.start()
        wrong = next(c for c in choice_set.choices if c != choice_set.correct_answer)

        # When
        result = session.answer(wrong)

        # Then
        assert not result.is_correct
        assert result.selected == wrong
        assert result.correct_answer == choice_set.correct_answer
        assert result.score == 0

    def test_no_answer_times_out(self, carousel: Carousel) -> None:
        session = QuizSession(carousel, clock=FakeClock())
        session.start()

        result = session.answer(None)

        assert result.timed_out
        assert not result.is_correct
        assert result.selected is None

    def test_late_answer_counts_as_time_out(self, carousel: Carousel) -> None:
        # Given
        clock = FakeClock()
        session = QuizSession(carousel, clock=clock)
        choice_set = session.start()

        # When
        clock.now += 16
        result = session.answer(choice_set.correct_answer)

        # Then
        assert session.time_left() == 15  # countdown restarted for the next question
        assert result.timed_out
        assert not result.is_correct
        assert result.score == 0

    def test_countdown(self, carousel: Carousel) -> None:
        clock = FakeClock()
        session = QuizSession(carousel, clock=clock)
        session.start()

        clock.now += 4.5

        assert session.time_left() == 11

        clock.now += 10.4

        assert session.time_left() == 1

    def test_answer_just_before_the_deadline_scores(self, carousel: Carousel) -> None:
        # Given
        clock = FakeClock()
        session = QuizSession(carousel, clock=clock)
        choice_set = session.start()

        # When
        clock.now += 14.5
        result = session.answer(choice_set.correct_answer)

        # Then
        assert not result.timed_out
        assert result.is_correct
        assert result.score == 1

    def test_answer_at_the_deadline_times_out(self, carousel: Carousel) -> None:
        # Given
        clock = FakeClock()
        session = QuizSession(carousel, clock=clock)
        choice_set = session.start()

        # When
        clock.now += 15
        remaining = session.time_left()
        result = session.answer(choice_set.correct_answer)

        # Then
        assert remaining == 0
        assert result.timed_out
        assert not result.is_correct

    def test_game_ends_after_configured_questions(self, carousel: Carousel) -> None:
        # Given
        options = QuizOptions(questions_per_game=3)
        session = QuizSession(carousel, options=options, clock=FakeClock())
        session.start()

        # When
        results = []
        for _ in range(3):
            assert session.choice_set is not None
            results.append(session.answer(session.choice_set.correct_answer))

        # Then
        assert [r.finished for r in results] == [False, False, True]
        assert results[-1].score == 3
        assert session.finished
        assert session.choice_set is None
        assert session.time_left() == 0
        with pytest.raises(QuizFinishedError):
            session.answer("Tacoma")

    def test_restart_resets_score(self, carousel: Carousel) -> None:
        session = QuizSession(carousel, options=QuizOptions(questions_per_game=1), clock=FakeClock())
        choice_set = session.start()
        session.answer(choice_set.correct_answer)

        session.start()

        assert session.score == 0
        assert session.questions_answered == 0
        assert not session.finished

    def test_empty_carousel_raises(self) -> None:
        with pytest.raises(EmptyPoolError):
            QuizSession(Carousel([]))


class TestQuizSessionRegistry:
    def test_get_returns_added_session(self, carousel: Carousel) -> None:
        registry = QuizSessionRegistry()
        session = registry.add(QuizSession(carousel))

        assert registry.get(session.id) is session

    def test_unknown_session_raises(self) -> None:
        with pytest.raises(SessionNotFoundError):
            QuizSessionRegistry().get("missing")

    def test_oldest_session_is_evicted(self, carousel: Carousel) -> None:
        # Given
        registry = QuizSessionRegistry(max_sessions=2)
        first = registry.add(QuizSession(carousel))
        registry.add(QuizSession(carousel))

        # When
        registry.add(QuizSession(carousel))

        # Then
        assert len(registry) == 2
        with pytest.raises(SessionNotFoundError):
            registry.get(first.id)
