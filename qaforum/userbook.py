"""The collection of forum users, loaded from and saved to per-user files."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from pathlib import Path

from .basicinfo import StrPath
from .records import User, UserField, dump_user_field, load_user_field

USER_SECTION = "user"


class UserBook:
    """All known users, keyed by id, with the follow relations between them."""

    def __init__(self, data_dir: StrPath) -> None:
        self.data_dir = Path(data_dir)
        self._users: dict[int, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __iter__(self) -> Iterator[int]:
        return iter(self._users)

    def _field_path(self, user_id: int, kind: UserField) -> Path:
        return self.data_dir / USER_SECTION / kind.value / f"{user_id}.txt"

    def _get(self, user_id: int) -> User:
        try:
            return self._users[user_id]
        except KeyError:
            raise KeyError(f"unknown user id {user_id}") from None

    def load(self, names_to_ids: Mapping[str, int]) -> None:
        """Read every user named in ``names_to_ids``; missing files give defaults."""
        self._users.clear()
        for name in sorted(names_to_ids):
            user_id = names_to_ids[name]
            user = User(user_id=user_id, user_name=name)
            for kind in UserField:
                try:
                    text = self._field_path(user_id, kind).read_text(encoding="utf-8")
                except FileNotFoundError:
                    text = ""
                load_user_field(user, kind, text)
            self._users[user_id] = user

    def save(self) -> None:
        """Write every field of every user to its file."""
        for user_id, user in self._users.items():
            for kind in UserField:
                path = self._field_path(user_id, kind)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(dump_user_field(user, kind), encoding="utf-8")

    def user(self, user_id: int) -> User:
        """Return a copy of the user's record."""
        return copy.deepcopy(self._get(user_id))

    def user_name(self, user_id: int) -> str:
        return self._get(user_id).user_name

    def update_user(self, user: User) -> None:
        """Replace the stored record of ``user.user_id`` with ``user``."""
        self._get(user.user_id)
        self._users[user.user_id] = copy.deepcopy(user)

    def user_statistics(self, user_id: int, praise_count: int) -> str:
        """The statistics line shown on a user's information page."""
        user = self._get(user_id)
        return (
            f"统计信息         回答:{len(user.answers)}·提问:{len(user.questions)}"
            f"·关注:{len(user.followees)}·粉丝:{len(user.fans)}·获赞:{praise_count}"
        )

    def is_following(self, follower: int, followee: int) -> bool:
        return self._get(followee).is_concerned_by(follower)

    def follow(self, follower: int, followee: int) -> None:
        follower_user = self._get(follower)
        followee_user = self._get(followee)
        follower_user.followees.add(followee)
        followee_user.fans.add(follower)

    def unfollow(self, follower: int, followee: int) -> None:
        follower_user = self._get(follower)
        followee_user = self._get(followee)
        follower_user.followees.discard(followee)
        followee_user.fans.discard(follower)

    def set_following(self, follower: int, followee: int, flag: bool) -> None:
        if flag:
            self.follow(follower, followee)
        else:
            self.unfollow(follower, followee)

    def is_following_question(self, user_id: int, question_id: int) -> bool:
        return self._get(user_id).is_concerning_question(question_id)

    def follow_question(self, user_id: int, question_id: int) -> None:
        self._get(user_id).followed_questions.add(question_id)

    def unfollow_question(self, user_id: int, question_id: int) -> None:
        self._get(user_id).followed_questions.discard(question_id)

    def followed_questions(self, user_id: int) -> set[int]:
        return set(self._get(user_id).followed_questions)

    def questions_of(self, user_id: int) -> set[int]:
        return set(self._get(user_id).questions)

    def answers_of(self, user_id: int) -> set[int]:
        return set(self._get(user_id).answers)

    def followees(self, user_id: int) -> set[int]:
        return set(self._get(user_id).followees)

    def fans(self, user_id: int) -> set[int]:
        return set(self._get(user_id).fans)

    def add_answer_of_user(self, answer_id: int, user_id: int) -> None:
        self._get(user_id).answers.add(answer_id)

    def add_question_of_user(self, question_id: int, user_id: int) -> None:
        self._get(user_id).questions.add(question_id)