"""The whole forum: users, questions and answers, kept in one data directory."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path

from .answer import (
    Answer,
    read_answer_question_map,
    read_answer_user_map,
    write_answer_question_map,
    write_answer_user_map,
)
from .basicinfo import StrPath
from .records import Question
from .userbook import UserBook


class ForumStore:
    """Every user, question and answer of the forum, loaded and saved together.

    ``user_ids`` maps user names to ids and ``question_owners`` maps question
    ids to their authors; they decide which users and questions are read.
    The answer-to-question and answer-to-user maps are read from and written
    to ``data_dir`` along with the answers.
    """

    def __init__(
        self,
        data_dir: StrPath,
        user_ids: Mapping[str, int] | None = None,
        question_owners: Mapping[int, int] | None = None,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.user_ids: dict[str, int] = dict(user_ids or {})
        self.question_owners: dict[int, int] = dict(question_owners or {})
        self.users = UserBook(self.data_dir)
        self.answers: dict[int, Answer] = {}
        self.questions: dict[int, Question] = {}
        self.answer_questions: dict[int, int] = {}
        self.answer_users: dict[int, int] = {}

    def load(self) -> None:
        """Read users, answers and questions from the data directory."""
        self.answer_questions = read_answer_question_map(self.data_dir)
        self.answer_users = read_answer_user_map(self.data_dir)
        self.users.load(self.user_ids)
        self.load_answers()
        self.load_questions()

    def save(self) -> None:
        """Write users, questions, answers and the answer maps."""
        self.users.save()
        self.save_questions()
        self.save_answers()
        write_answer_question_map(self.data_dir, self.answer_questions)
        write_answer_user_map(self.data_dir, self.answer_users)

    def load_answers(self) -> None:
        """Read every answer listed in the answer-to-user map."""
        self.answers.clear()
        for answer_id in sorted(self.answer_users):
            answer = Answer(info_id=answer_id, user_id=self.answer_users[answer_id])
            answer.read_info(self.data_dir)
            self.answers[answer_id] = answer

    def save_answers(self) -> None:
        for answer_id in sorted(self.answers):
            self.answers[answer_id].write_info(self.data_dir)

    def load_questions(self) -> None:
        """Read every question listed in the question-to-owner map."""
        self.questions.clear()
        for question_id in sorted(self.question_owners):
            question = Question(
                info_id=question_id, user_id=self.question_owners[question_id]
            )
            question.read_info(self.data_dir)
            self.questions[question_id] = question

    def save_questions(self) -> None:
        for question_id in sorted(self.questions):
            self.questions[question_id].write_info(self.data_dir)

    def _answer(self, answer_id: int) -> Answer:
        try:
            return self.answers[answer_id]
        except KeyError:
            raise KeyError(f"unknown answer id {answer_id}") from None

    def _question(self, question_id: int) -> Question:
        try:
            return self.questions[question_id]
        except KeyError:
            raise KeyError(f"unknown question id {question_id}") from None

    def is_answer_praised_by(self, answer_id: int, user_id: int) -> bool:
        return self._answer(answer_id).is_praised_by(user_id)

    def add_praiser(self, answer_id: int, user_id: int) -> None:
        self._answer(answer_id).add_praiser(user_id)

    def delete_praiser(self, answer_id: int, user_id: int) -> None:
        self._answer(answer_id).delete_praiser(user_id)

    def answer_time(self, answer_id: int) -> datetime:
        return self._answer(answer_id).date_time

    def question_time(self, question_id: int) -> datetime:
        return self._question(question_id).date_time

    def answer_content(self, answer_id: int) -> str:
        return self._answer(answer_id).content

    def answer_praise_count(self, answer_id: int) -> int:
        return self._answer(answer_id).praise_count()

    def user_answer_to_question(self, user_id: int, question_id: int) -> int | None:
        """The id of the user's answer to the question, or None if there is none."""
        for answer_id in sorted(self.users.answers_of(user_id)):
            if self.answer_questions.get(answer_id) == question_id:
                return answer_id
        return None

    def add_answer_of_question(self, answer_id: int, question_id: int) -> None:
        self._question(question_id).add_answer(answer_id)

    def answers_by_time(self, answer_ids: Iterable[int]) -> list[int]:
        """Answer ids, newest first."""
        return sorted(answer_ids, key=self.answer_time, reverse=True)

    def answers_by_praise(self, answer_ids: Iterable[int]) -> list[int]:
        """Answer ids, most praised first."""
        return sorted(answer_ids, key=self.answer_praise_count, reverse=True)

    def questions_by_time(self, question_ids: Iterable[int]) -> list[int]:
        """Question ids, newest first."""
        return sorted(question_ids, key=self.question_time, reverse=True)

    def answer_list_of(self, user_id: int) -> list[tuple[int, int]]:
        """(question id, answer id) pairs of the user's answers, newest first."""
        ordered = self.answers_by_time(sorted(self.users.answers_of(user_id)))
        return [(self.answer_questions[answer_id], answer_id) for answer_id in ordered]