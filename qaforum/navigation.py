"""Page history for the forum's main view and the labels of its guide bar."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum


class Page(IntEnum):
    """The kinds of page that can be shown in the main view."""

    HOME = 0
    EDIT_PROFILE = 1
    VIEW_PROFILE = 2
    QUESTION_DETAIL = 3
    ALL_QUESTIONS = 4
    FOLLOWED_QUESTIONS = 5
    USER_QUESTIONS = 6
    FANS = 7
    FOLLOWEES = 8
    USER_ANSWERS = 9
    EDIT_ANSWER = 10
    EDIT_QUESTION = 11
    TITLE_SEARCH = 12
    TIME_SEARCH = 13


class GuideMode(IntEnum):
    """Whether the guide bar shows the signed-in user's items or someone else's."""

    MINE = 0
    HIS = 1


class _Button(str, Enum):
    EDIT_PERSONAL_INFO = "edit_personal_info"
    ALL_QUESTIONS = "all_questions"
    QUESTIONS = "questions"
    ANSWERS = "answers"
    FOLLOWED_QUESTIONS = "followed_questions"
    FANS = "fans"
    FOLLOWEES = "followees"
    ADD_QUESTION = "add_question"
    SIGN_OUT = "sign_out"


_FIXED_LABELS = {
    _Button.ALL_QUESTIONS: "全部提问",
    _Button.SIGN_OUT: "注销",
}

_MODE_LABELS = {
    GuideMode.MINE: {
        _Button.EDIT_PERSONAL_INFO: "编辑个人信息",
        _Button.QUESTIONS: "我的提问",
        _Button.ANSWERS: "我的回答",
        _Button.FOLLOWED_QUESTIONS: "我关注的提问",
        _Button.FANS: "我的粉丝",
        _Button.FOLLOWEES: "我关注的用户",
        _Button.ADD_QUESTION: "我要提问",
    },
    GuideMode.HIS: {
        _Button.EDIT_PERSONAL_INFO: "他的个人信息",
        _Button.QUESTIONS: "他的提问",
        _Button.ANSWERS: "他的回答",
        _Button.FOLLOWED_QUESTIONS: "他关注的提问",
        _Button.FANS: "他的粉丝",
        _Button.FOLLOWEES: "他关注的用户",
        _Button.ADD_QUESTION: "返回我的",
    },
}


def guide_labels(mode: GuideMode | int) -> dict[str, str]:
    """Button name to label text of the guide bar in ``mode``.

    Raises ValueError for an unknown mode.
    """
    labels = {**_MODE_LABELS[GuideMode(mode)], **_FIXED_LABELS}
    return {button.value: text for button, text in labels.items()}


@dataclass(frozen=True)
class HistoryEntry:
    """One visited page: what it shows and whose guide bar it was shown with."""

    page: Page
    target_id: int = 0
    mine_or_his: GuideMode = GuideMode.MINE
    content: str | None = None
    start: datetime | None = None
    end: datetime | None = None


class NavigationHistory:
    """A stack of visited pages; retreating returns to the page shown before."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

    def push(
        self,
        page: Page | int,
        target_id: int = 0,
        mine_or_his: GuideMode | int = GuideMode.MINE,
    ) -> HistoryEntry:
        """Record a visit to ``page`` about ``target_id`` and return the entry."""
        entry = HistoryEntry(Page(page), target_id, GuideMode(mine_or_his))
        self._entries.append(entry)
        return entry

    def push_title_search(self, content: str) -> HistoryEntry:
        """Record a search of question titles for ``content``."""
        entry = HistoryEntry(Page.TITLE_SEARCH, content=content)
        self._entries.append(entry)
        return entry

    def push_time_search(self, start: datetime, end: datetime) -> HistoryEntry:
        """Record a search of questions posted between ``start`` and ``end``."""
        entry = HistoryEntry(Page.TIME_SEARCH, start=start, end=end)
        self._entries.append(entry)
        return entry

    def current(self) -> HistoryEntry:
        """The page now shown; IndexError if nothing has been visited."""
        if not self._entries:
            raise IndexError("navigation history is empty")
        return self._entries[-1]

    def retreat(self) -> HistoryEntry | None:
        """Drop the current page and return the one before it.

        With a single page recorded nothing changes and None is returned;
        IndexError is raised if the history is empty.
        """
        if not self._entries:
            raise IndexError("navigation history is empty")
        if len(self._entries) == 1:
            return None
        self._entries.pop()
        return self._entries[-1]

    def clear(self) -> None:
        """Forget every visited page."""
        self._entries.clear()