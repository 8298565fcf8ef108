"""Model of a question-and-answer forum: records, text-file storage, page history and sessions."""

__version__ = "0.1.0"

__all__ = [
    "answer",
    "basicinfo",
    "navigation",
    "records",
    "session",
    "store",
    "userbook",
]