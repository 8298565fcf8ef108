"""A signed-in user's session: logging in, posting and searching questions."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime

from .answer import Answer
from .navigation import GuideMode, NavigationHistory, Page
from .records import Question, md5_hex
from .store import ForumStore


class LoginError(Exception):
    """Wrong user name or password, or an action that needs a signed-in user."""


class EmptyContentError(ValueError):
    """Submitted text that is blank once surrounding whitespace is removed."""


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


class Session:
    """One user's use of the forum, from login to sign-out.

    ``passwords`` maps user ids to the MD5 hex digest of their password.
    New answer and question ids continue from ``next_answer_id`` and
    ``next_question_id``; by default they follow the largest id in ``store``.
    """

    def __init__(
        self,
        store: ForumStore,
        passwords: Mapping[int, str],
        *,
        next_answer_id: int | None = None,
        next_question_id: int | None = None,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        self.store = store
        self.passwords = dict(passwords)
        self.history = NavigationHistory()
        self.clock = clock
        known_answers = set(store.answers) | set(store.answer_users)
        known_questions = set(store.questions) | set(store.question_owners)
        self.next_answer_id = (
            next_answer_id
            if next_answer_id is not None
            else max(known_answers, default=-1) + 1
        )
        self.next_question_id = (
            next_question_id
            if next_question_id is not None
            else max(known_questions, default=-1) + 1
        )
        self.current_user_id: int | None = None
        self.current_user_name: str | None = None
        self.current_looking_user_id: int | None = None

    def _require_user(self) -> int:
        if self.current_user_id is None:
            raise LoginError("no user is signed in")
        return self.current_user_id

    def login(self, user_name: str, password: str) -> int:
        """Sign in and return the user's id; LoginError if the details are wrong."""
        name = user_name.strip()
        secret = password.strip()
        user_id = self.store.user_ids.get(name)
        if user_id is None or self.passwords.get(user_id) != md5_hex(secret):
            raise LoginError("用户名或密码错误！")
        self.current_user_id = user_id
        self.current_looking_user_id = user_id
        self.current_user_name = name
        self.history.clear()
        self.history.push(Page.HOME)
        return user_id

    def submit_answer(self, question_id: int, text: str) -> int:
        """Post or replace the signed-in user's answer to a question.

        Returns the answer id. The page shown before the answer editor is
        shown again afterwards.
        """
        user_id = self._require_user()
        if not text.strip():
            raise EmptyContentError("回答不能为空！")
        if question_id not in self.store.questions:
            raise KeyError(f"unknown question id {question_id}")
        answer_id = self.store.user_answer_to_question(user_id, question_id)
        if answer_id is None:
            answer_id = self.next_answer_id
            self.next_answer_id += 1
        self.store.users.add_answer_of_user(answer_id, user_id)
        self.store.add_answer_of_question(answer_id, question_id)
        self.store.answer_questions[answer_id] = question_id
        self.store.answer_users[answer_id] = user_id
        self.store.answers[answer_id] = Answer(
            info_id=answer_id,
            user_id=user_id,
            date_time=self.clock(),
            content=text,
        )
        if self.history:
            self.history.retreat()
        return answer_id

    def submit_question(self, title: str, detail: str) -> int:
        """Post a new question and return its id; the view moves to all questions."""
        user_id = self._require_user()
        if not title.strip():
            raise EmptyContentError("标题不能为空！")
        question_id = self.next_question_id
        self.next_question_id += 1
        self.store.questions[question_id] = Question(
            info_id=question_id,
            user_id=user_id,
            date_time=self.clock(),
            content=detail,
            title=title,
        )
        self.store.question_owners[question_id] = user_id
        self.store.users.add_question_of_user(question_id, user_id)
        self.history.push(Page.ALL_QUESTIONS, user_id, GuideMode.MINE)
        return question_id

    def search_titles(self, content: str) -> list[int]:
        """Ids of questions whose title contains ``content``, newest first."""
        self.history.push_title_search(content)
        matches = [
            question_id
            for question_id, question in self.store.questions.items()
            if content in question.title
        ]
        return self.store.questions_by_time(sorted(matches))

    def search_between(self, start: datetime, end: datetime) -> list[int]:
        """Ids of questions posted from ``start`` to ``end`` inclusive, newest first."""
        self.history.push_time_search(start, end)
        matches = [
            question_id
            for question_id, question in self.store.questions.items()
            if start <= question.date_time <= end
        ]
        return self.store.questions_by_time(sorted(matches))

    def sign_out(self) -> None:
        """Save everything, forget the page history and the signed-in user."""
        self.store.save()
        self.history.clear()
        self.current_user_id = None
        self.current_user_name = None
        self.current_looking_user_id = None