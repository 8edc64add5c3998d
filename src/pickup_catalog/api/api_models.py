from pydantic import BaseModel, Field

from pickup_catalog.quiz.models import AnswerResult, CatalogItem


class GenerateChoicesRequest(BaseModel):
    """Request to build the options for one item of a caller-supplied pool."""

    pool: list[CatalogItem] = Field(
        ..., min_length=1, description="Every item available in the play-through"
    )
    current_index: int = Field(..., ge=0, description="Index of the pictured item")
    num_choices: int = Field(default=4, ge=2, description="Maximum number of options")


class QuizImage(BaseModel):
    src: str = Field(..., description="CDN URL of the pictured truck")
    alt: str = Field(default="", description="Alternative text")
    caption: str | None = Field(None, description="Optional caption")


class QuizQuestionResponse(BaseModel):
    """Current state of a game session."""

    session_id: str
    question_number: int = Field(..., description="1-based number of the open question")
    questions_per_game: int
    score: int
    finished: bool
    time_left: int = Field(..., description="Seconds left to answer")
    reveal_seconds: int = Field(
        ..., description="How long the client shows the right answer before moving on"
    )
    image: QuizImage | None = Field(None, description="None once the game is over")
    choices: list[str] = Field(
        default_factory=list, description="Options in display order (A, B, C, ...)"
    )


class AnswerRequest(BaseModel):
    answer: str | None = Field(None, description="Chosen option, null when time ran out")


class AnswerResponse(BaseModel):
    result: AnswerResult
    question: QuizQuestionResponse = Field(
        ..., description="Session state after the answer (the next question, if any)"
    )
