"""Answers to questions and the files mapping answers to questions and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .basicinfo import BasicInfo, StrPath
from .records import AnswerField, dump_answer_field, load_answer_field

ANSWER_QUESTION_FILE = "answerBelongToQuestion.txt"
ANSWER_USER_FILE = "answerBelongToUser.txt"


@dataclass
class Answer(BasicInfo):
    """An answer and the set of users who praised it."""

    praisers: set[int] = field(default_factory=set)

    section = "answers"

    def praise_count(self) -> int:
        return len(self.praisers)

    def is_praised_by(self, user_id: int) -> bool:
        return user_id in self.praisers

    def add_praiser(self, user_id: int) -> None:
        self.praisers.add(user_id)

    def delete_praiser(self, user_id: int) -> None:
        self.praisers.discard(user_id)

    def clear_praisers(self) -> None:
        self.praisers.clear()

    def read_info(self, data_dir: StrPath) -> None:
        for kind in AnswerField:
            load_answer_field(self, kind, self._read_field(data_dir, kind.value))

    def write_info(self, data_dir: StrPath) -> None:
        for kind in AnswerField:
            self._write_field(data_dir, kind.value, dump_answer_field(self, kind))


def read_id_map(path: StrPath) -> dict[int, int]:
    """Read whitespace-separated key/value id pairs; a missing file is empty."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    tokens = [int(token) for token in text.split()]
    if len(tokens) % 2:
        raise ValueError(f"{path}: odd number of ids")
    return dict(zip(tokens[::2], tokens[1::2]))


def write_id_map(path: StrPath, mapping: dict[int, int]) -> None:
    """Write one "key value" line per entry, in key order."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        "".join(f"{key} {mapping[key]}\n" for key in sorted(mapping)),
        encoding="utf-8",
    )


def read_answer_question_map(data_dir: StrPath) -> dict[int, int]:
    """Map of answer id to the id of the question it answers."""
    return read_id_map(Path(data_dir) / ANSWER_QUESTION_FILE)


def read_answer_user_map(data_dir: StrPath) -> dict[int, int]:
    """Map of answer id to the id of its author."""
    return read_id_map(Path(data_dir) / ANSWER_USER_FILE)


def write_answer_question_map(data_dir: StrPath, mapping: dict[int, int]) -> None:
    write_id_map(Path(data_dir) / ANSWER_QUESTION_FILE, mapping)


def write_answer_user_map(data_dir: StrPath, mapping: dict[int, int]) -> None:
    write_id_map(Path(data_dir) / ANSWER_USER_FILE, mapping)