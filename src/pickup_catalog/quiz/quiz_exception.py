class QuizError(Exception):
    """Base exception for all trivia game errors."""
    def __init__(self, message: str):
        super().__init__(message)


class EmptyPoolError(QuizError, ValueError):
    """Raised when a game is started without any catalog images."""
    def __init__(self) -> None:
        super().__init__("No catalog images are available for a game.")


class QuizFinishedError(QuizError):
    """Raised when a finished game receives another answer."""
    def __init__(self, questions_answered: int):
        super().__init__(f"Game is over after {questions_answered} questions.")


class SessionNotFoundError(QuizError, KeyError):
    """Raised when a session id is unknown or was evicted."""
    def __init__(self, session_id: str):
        super().__init__(f"Unknown quiz session: {session_id}")
