"""
Exception taxonomy for the quiz read API.

Every domain failure is raised inside the handling operation and turned
into a uniform ``{"error": message}`` envelope by the blueprint's error
handler. Only ``Internal`` is logged for operational follow-up.

Hierarchy:
    Exception
    +-- QuizError
    |   +-- ValidationFailed
    |   +-- Unauthorized
    |   +-- AlreadyPosted
    |   +-- NoSchedule
    |   +-- NotFound
    |   +-- Internal
    +-- ConfigurationError
"""


class QuizError(Exception):
    """Base class for failures reported to the caller as ``{"error": ...}``."""

    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message}


class ValidationFailed(QuizError):
    status_code = 400
    default_message = 'Invalid request'


class Unauthorized(QuizError):
    status_code = 401
    default_message = 'Unauthorized'


class AlreadyPosted(QuizError):
    status_code = 409
    default_message = 'You have already posted a question for this topic this week'


class NoSchedule(QuizError):
    status_code = 404
    default_message = 'No schedule found for this topic'


class NotFound(QuizError):
    status_code = 404
    default_message = 'Question not found'


class Internal(QuizError):
    status_code = 500
    default_message = 'Internal server error'


class ConfigurationError(Exception):
    """Raised when the timetable or slot reference data is malformed."""

    pass
