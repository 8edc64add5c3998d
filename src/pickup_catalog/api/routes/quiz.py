from fastapi import APIRouter, HTTPException, Request

from pickup_catalog.api.api_models import (
    AnswerRequest,
    AnswerResponse,
    GenerateChoicesRequest,
    QuizImage,
    QuizQuestionResponse,
)
from pickup_catalog.catalog.carousel import Carousel
from pickup_catalog.cms.asset_urls import image_url
from pickup_catalog.config import CatalogSettings
from pickup_catalog.quiz.choice_generator.choice_generator import generate_choices
from pickup_catalog.quiz.models import ChoiceSet
from pickup_catalog.quiz.quiz_session import QuizSession

router = APIRouter(prefix="/api")


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/quiz/choices", response_model=ChoiceSet)
async def create_choices(request: GenerateChoicesRequest) -> ChoiceSet:
    """
    Build multiple-choice answers for one item of the given pool.

    Args:
        request (GenerateChoicesRequest): The pool and the pictured item's index.

    Returns:
        The correct answer and the shuffled options.
    """
    try:
        return generate_choices(request.pool, request.current_index, request.num_choices)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/quiz/sessions", response_model=QuizQuestionResponse, status_code=201)
async def start_session(request: Request) -> QuizQuestionResponse:
    """Start a game over every catalog image and return its first question."""
    settings: CatalogSettings = request.app.state.settings
    images = await request.app.state.catalog.list_carousel_images()

    session = QuizSession(Carousel(images), options=settings.quiz)
    session.start()
    request.app.state.quiz_sessions.add(session)
    return _question_response(session, settings)


@router.get("/quiz/sessions/{session_id}", response_model=QuizQuestionResponse)
async def get_session(request: Request, session_id: str) -> QuizQuestionResponse:
    session = request.app.state.quiz_sessions.get(session_id)
    return _question_response(session, request.app.state.settings)


@router.post("/quiz/sessions/{session_id}/answer", response_model=AnswerResponse)
async def answer_question(
    request: Request, session_id: str, body: AnswerRequest
) -> AnswerResponse:
    session = request.app.state.quiz_sessions.get(session_id)
    result = session.answer(body.answer)
    return AnswerResponse(
        result=result,
        question=_question_response(session, request.app.state.settings),
    )


def _question_response(
    session: QuizSession, settings: CatalogSettings
) -> QuizQuestionResponse:
    image = None
    choices: list[str] = []
    if not session.finished and session.choice_set is not None:
        current = session.current_image
        image = QuizImage(
            src=image_url(current.asset.ref, settings, quality=85),
            alt=current.alt or "",
            caption=current.caption,
        )
        choices = session.choice_set.choices

    return QuizQuestionResponse(
        session_id=session.id,
        question_number=min(session.question_number, session.options.questions_per_game),
        questions_per_game=session.options.questions_per_game,
        score=session.score,
        finished=session.finished,
        time_left=session.time_left(),
        reveal_seconds=session.options.reveal_seconds,
        image=image,
        choices=choices,
    )
