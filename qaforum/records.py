"""User and question records and the text formats of their stored fields."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Callable

from .basicinfo import DEFAULT_MOMENT, BasicInfo, StrPath

if TYPE_CHECKING:
    from .answer import Answer

DEFAULT_GENDER = 2
DEFAULT_BIRTHDAY = date(2000, 1, 1)


class UserField(Enum):
    """Stored user fields; each value is the folder holding that field."""

    INFORMATION = "personal information"
    INTRODUCTION = "personal introduction"
    ANSWERS = "answers"
    FANS = "fans"
    FOLLOWEES = "concerners"
    QUESTIONS = "questions"
    FOLLOWED_QUESTIONS = "concern questions"


class AnswerField(Enum):
    """Stored answer fields; each value is the folder holding that field."""

    DATE = "information"
    CONTENT = "content"
    PRAISERS = "praisers"


class QuestionField(Enum):
    """Stored question fields; each value is the folder holding that field."""

    ANSWERS = "answerList"
    TITLE = "title"
    DETAIL = "detail"
    DATE = "information"


@dataclass
class User:
    """A forum member and the ids of everything linked to them."""

    user_id: int = 0
    user_name: str = ""
    gender: int = DEFAULT_GENDER
    birthday: date = DEFAULT_BIRTHDAY
    introduction: str = ""
    answers: set[int] = field(default_factory=set)
    fans: set[int] = field(default_factory=set)
    followees: set[int] = field(default_factory=set)
    questions: set[int] = field(default_factory=set)
    followed_questions: set[int] = field(default_factory=set)

    def is_concerned_by(self, user_id: int) -> bool:
        """True if ``user_id`` follows this user."""
        return user_id in self.fans

    def is_concerning_question(self, question_id: int) -> bool:
        """True if this user follows the question."""
        return question_id in self.followed_questions


@dataclass
class Question(BasicInfo):
    """A question: a title, a detailed description and its answers."""

    title: str = ""
    answers: set[int] = field(default_factory=set)

    section = "questions"

    def add_answer(self, answer_id: int) -> None:
        self.answers.add(answer_id)

    def clear_answers(self) -> None:
        self.answers.clear()

    def read_info(self, data_dir: StrPath) -> None:
        for kind in QuestionField:
            load_question_field(self, kind, self._read_field(data_dir, kind.value))

    def write_info(self, data_dir: StrPath) -> None:
        for kind in QuestionField:
            self._write_field(data_dir, kind.value, dump_question_field(self, kind))


def format_timestamp(moment: datetime) -> str:
    """Render a moment as "year month day hour minute second"."""
    return (
        f"{moment.year} {moment.month} {moment.day} "
        f"{moment.hour} {moment.minute} {moment.second}"
    )


def parse_timestamp(text: str) -> datetime:
    """Parse the output of :func:`format_timestamp`; blank text gives the default."""
    tokens = text.split()
    if not tokens:
        return DEFAULT_MOMENT
    if len(tokens) < 6:
        raise ValueError(f"incomplete timestamp: {text!r}")
    year, month, day, hour, minute, second = (int(t) for t in tokens[:6])
    return datetime(year, month, day, hour, minute, second)


def _format_ids(ids: set[int]) -> str:
    return f"{len(ids)}\n" + "".join(f"{item} " for item in sorted(ids))


def _parse_ids(text: str) -> set[int]:
    tokens = text.split()
    if not tokens:
        return set()
    amount = int(tokens[0])
    values = tokens[1 : 1 + amount]
    if len(values) < amount:
        raise ValueError(f"id list announces {amount} entries but holds {len(values)}")
    return {int(value) for value in values}


_USER_ID_SETS: dict[UserField, Callable[[User], set[int]]] = {
    UserField.ANSWERS: lambda user: user.answers,
    UserField.FANS: lambda user: user.fans,
    UserField.FOLLOWEES: lambda user: user.followees,
    UserField.QUESTIONS: lambda user: user.questions,
    UserField.FOLLOWED_QUESTIONS: lambda user: user.followed_questions,
}


def dump_user_field(user: User, field: UserField) -> str:
    """Return the stored text of one user field."""
    if field is UserField.INFORMATION:
        born = user.birthday
        return f"{user.gender} {born.year} {born.month} {born.day}"
    if field is UserField.INTRODUCTION:
        return user.introduction
    return _format_ids(_USER_ID_SETS[field](user))


def load_user_field(user: User, field: UserField, text: str) -> None:
    """Set one field of ``user`` from its stored text."""
    if field is UserField.INFORMATION:
        tokens = text.split()
        if not tokens:
            user.gender, user.birthday = DEFAULT_GENDER, DEFAULT_BIRTHDAY
            return
        if len(tokens) < 4:
            raise ValueError(f"incomplete personal information: {text!r}")
        gender, year, month, day = (int(t) for t in tokens[:4])
        user.gender = gender
        user.birthday = date(year, month, day)
    elif field is UserField.INTRODUCTION:
        user.introduction = text
    else:
        ids = _USER_ID_SETS[field](user)
        ids.clear()
        ids.update(_parse_ids(text))


def dump_answer_field(answer: Answer, field: AnswerField) -> str:
    """Return the stored text of one answer field."""
    if field is AnswerField.DATE:
        return format_timestamp(answer.date_time)
    if field is AnswerField.CONTENT:
        return answer.content
    return _format_ids(answer.praisers)


def load_answer_field(answer: Answer, field: AnswerField, text: str) -> None:
    """Set one field of ``answer`` from its stored text."""
    if field is AnswerField.DATE:
        answer.date_time = parse_timestamp(text)
    elif field is AnswerField.CONTENT:
        answer.content = text
    else:
        answer.praisers.clear()
        answer.praisers.update(_parse_ids(text))


def dump_question_field(question: Question, field: QuestionField) -> str:
    """Return the stored text of one question field."""
    if field is QuestionField.ANSWERS:
        return _format_ids(question.answers)
    if field is QuestionField.TITLE:
        return question.title
    if field is QuestionField.DETAIL:
        return question.content
    return format_timestamp(question.date_time)


def load_question_field(question: Question, field: QuestionField, text: str) -> None:
    """Set one field of ``question`` from its stored text."""
    if field is QuestionField.ANSWERS:
        question.answers.clear()
        question.answers.update(_parse_ids(text))
    elif field is QuestionField.TITLE:
        question.title = text
    elif field is QuestionField.DETAIL:
        question.content = text
    else:
        question.date_time = parse_timestamp(text)


def md5_hex(text: str) -> str:
    """MD5 of the Latin-1 form of ``text`` (unencodable characters become '?')."""
    data = text.encode("latin-1", errors="replace")
    return hashlib.md5(data).hexdigest()