from pydantic import BaseModel, ConfigDict, Field


class CatalogItem(BaseModel):
    """A single entry of the quiz pool."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Display title of the truck model")
    group_key: str = Field(
        ..., description="Grouping key used to pick plausible distractors (manufacturer)"
    )


class ChoiceSet(BaseModel):
    """Multiple-choice answers for one trivia question."""

    correct_answer: str = Field(..., description="Title of the pictured truck model")
    choices: list[str] = Field(
        ..., description="Unique options in display order, including the correct answer"
    )


class QuizOptions(BaseModel):
    """Options for a trivia game."""

    num_choices: int = Field(
        default=4, ge=2, description="Number of options shown per question"
    )
    questions_per_game: int = Field(
        default=10, ge=1, description="Questions answered before the game ends"
    )
    seconds_per_question: int = Field(
        default=15, ge=1, description="Countdown before a question times out"
    )
    reveal_seconds: int = Field(
        default=2, ge=0, description="Delay before the next question is shown"
    )
    autoplay_seconds: int = Field(
        default=4, ge=1, description="Carousel auto-advance interval outside the game"
    )


class AnswerResult(BaseModel):
    """Outcome of answering one question."""

    selected: str | None = Field(None, description="Chosen option, None on time-out")
    correct_answer: str = Field(..., description="The expected option")
    is_correct: bool = Field(..., description="Whether the selection was right")
    timed_out: bool = Field(..., description="Whether the countdown expired")
    score: int = Field(..., description="Correct answers so far")
    questions_answered: int = Field(..., description="Questions answered so far")
    finished: bool = Field(..., description="Whether the game is over")
