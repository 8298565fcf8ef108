from datetime import date

import pytest

from qaforum.records import DEFAULT_BIRTHDAY, DEFAULT_GENDER, User
from qaforum.userbook import UserBook

NAMES = {"alice": 1, "bob": 2, "carol": 3}


@pytest.fixture
def book(tmp_path):
    users = UserBook(tmp_path)
    users.load(NAMES)
    return users


def test_load_without_files_gives_defaults(book):
    alice = book.user(1)
    assert alice.user_name == "alice"
    assert alice.gender == DEFAULT_GENDER
    assert alice.birthday == DEFAULT_BIRTHDAY
    assert alice.introduction == ""
    assert alice.fans == set()
    assert len(book) == 3


def test_user_name_and_unknown_user(book):
    assert book.user_name(2) == "bob"
    with pytest.raises(KeyError):
        book.user_name(99)
    with pytest.raises(KeyError):
        book.follow(1, 99)


def test_follow_and_unfollow_keep_both_sides(book):
    book.follow(1, 2)
    assert book.is_following(1, 2)
    assert not book.is_following(2, 1)
    assert book.followees(1) == {2}
    assert book.fans(2) == {1}
    book.unfollow(1, 2)
    assert not book.is_following(1, 2)
    assert book.followees(1) == set()
    assert book.fans(2) == set()


def test_set_following(book):
    book.set_following(3, 1, True)
    assert book.is_following(3, 1)
    book.set_following(3, 1, False)
    assert not book.is_following(3, 1)


def test_question_follows(book):
    book.follow_question(2, 7)
    assert book.is_following_question(2, 7)
    assert book.followed_questions(2) == {7}
    book.unfollow_question(2, 7)
    assert not book.is_following_question(2, 7)


def test_answers_and_questions_of_user(book):
    book.add_answer_of_user(5, 1)
    book.add_question_of_user(8, 1)
    assert book.answers_of(1) == {5}
    assert book.questions_of(1) == {8}
    assert book.answers_of(2) == set()


def test_user_returns_copy_and_update_replaces(book):
    alice = book.user(1)
    alice.introduction = "hello"
    alice.gender = 1
    assert book.user(1).introduction == ""
    book.update_user(alice)
    assert book.user(1) == alice
    with pytest.raises(KeyError):
        book.update_user(User(user_id=42))


def test_statistics_line(book):
    book.add_answer_of_user(5, 1)
    book.follow(2, 1)
    line = book.user_statistics(1, 4)
    assert line == "统计信息         回答:1·提问:0·关注:0·粉丝:1·获赞:4"


def test_save_and_reload_round_trip(tmp_path, book):
    alice = book.user(1)
    alice.gender = 0
    alice.birthday = date(1999, 5, 17)
    alice.introduction = "likes puzzles"
    book.update_user(alice)
    book.follow(1, 2)
    book.follow(3, 2)
    book.follow_question(1, 11)
    book.add_answer_of_user(4, 1)
    book.add_question_of_user(6, 3)
    book.save()

    reloaded = UserBook(tmp_path)
    reloaded.load(NAMES)
    for user_id in NAMES.values():
        assert reloaded.user(user_id) == book.user(user_id)


def test_saved_file_format(tmp_path, book):
    book.follow(1, 2)
    book.save()
    fans_text = (tmp_path / "user" / "fans" / "2.txt").read_text(encoding="utf-8")
    assert fans_text == "1\n1 "
    info_text = (tmp_path / "user" / "personal information" / "1.txt").read_text(
        encoding="utf-8"
    )
    assert info_text == "2 2000 1 1"

    reloaded = UserBook(tmp_path)
    reloaded.load(NAMES)
    assert reloaded.fans(2) == {1}
    assert reloaded.followees(1) == {2}
    assert reloaded.user(1).birthday == date(2000, 1, 1)