from datetime import date, datetime

import pytest

from qaforum.answer import Answer
from qaforum.basicinfo import DEFAULT_MOMENT
from qaforum.records import (
    AnswerField,
    Question,
    QuestionField,
    User,
    UserField,
    dump_answer_field,
    dump_question_field,
    dump_user_field,
    format_timestamp,
    load_answer_field,
    load_question_field,
    load_user_field,
    md5_hex,
    parse_timestamp,
)


def test_timestamp_format_from_input():
    assert format_timestamp(datetime(2021, 3, 4, 5, 6, 7)) == "2021 3 4 5 6 7"


@pytest.mark.parametrize(
    "moment",
    [datetime(2021, 3, 4, 5, 6, 7), datetime(1999, 12, 31, 23, 59, 58), DEFAULT_MOMENT],
)
def test_timestamp_round_trip(moment):
    assert parse_timestamp(format_timestamp(moment)) == moment


def test_blank_timestamp_is_default():
    assert parse_timestamp("") == datetime(2000, 1, 1, 12, 0, 0)
    assert parse_timestamp("  \n") == DEFAULT_MOMENT


@pytest.mark.parametrize("text", ["2020 1", "2020 13 1 0 0 0", "a b c d e f"])
def test_bad_timestamp_raises(text):
    with pytest.raises(ValueError):
        parse_timestamp(text)


def test_user_information_dump():
    user = User(gender=1, birthday=date(1999, 5, 6))
    assert dump_user_field(user, UserField.INFORMATION) == "1 1999 5 6"


def test_user_information_blank_gives_defaults():
    user = User(gender=0, birthday=date(1990, 2, 3))
    load_user_field(user, UserField.INFORMATION, "")
    assert user.gender == 2
    assert user.birthday == date(2000, 1, 1)


def test_user_information_round_trip():
    user = User(gender=0, birthday=date(1988, 11, 30))
    fresh = User()
    load_user_field(fresh, UserField.INFORMATION, dump_user_field(user, UserField.INFORMATION))
    assert (fresh.gender, fresh.birthday) == (0, date(1988, 11, 30))


def test_introduction_round_trip():
    user = User(introduction="first line\nsecond line")
    fresh = User()
    load_user_field(fresh, UserField.INTRODUCTION, dump_user_field(user, UserField.INTRODUCTION))
    assert fresh.introduction == "first line\nsecond line"


@pytest.mark.parametrize(
    "kind, attr",
    [
        (UserField.ANSWERS, "answers"),
        (UserField.FANS, "fans"),
        (UserField.FOLLOWEES, "followees"),
        (UserField.QUESTIONS, "questions"),
        (UserField.FOLLOWED_QUESTIONS, "followed_questions"),
    ],
)
def test_user_id_sets_round_trip_and_replace(kind, attr):
    source = User(**{attr: {12, 3, 40}})
    target = User(**{attr: {99}})
    load_user_field(target, kind, dump_user_field(source, kind))
    assert getattr(target, attr) == {3, 12, 40}


def test_empty_id_list_text_clears():
    user = User(fans={1, 2})
    load_user_field(user, UserField.FANS, "")
    assert user.fans == set()


def test_truncated_id_list_raises():
    with pytest.raises(ValueError):
        load_user_field(User(), UserField.ANSWERS, "3\n1 2")


def test_user_relations():
    user = User(fans={5}, followed_questions={8})
    assert user.is_concerned_by(5)
    assert not user.is_concerned_by(6)
    assert user.is_concerning_question(8)
    assert not user.is_concerning_question(5)


def test_answer_fields_round_trip():
    answer = Answer(date_time=datetime(2018, 7, 8, 9, 10, 11), content="text", praisers={2, 1})
    fresh = Answer()
    for kind in AnswerField:
        load_answer_field(fresh, kind, dump_answer_field(answer, kind))
    assert fresh.date_time == answer.date_time
    assert fresh.content == "text"
    assert fresh.praisers == {1, 2}


def test_question_fields_round_trip():
    question = Question(
        info_id=1,
        date_time=datetime(2017, 1, 2, 3, 4, 5),
        content="detail",
        title="title",
        answers={6, 2},
    )
    fresh = Question(info_id=1)
    for kind in QuestionField:
        load_question_field(fresh, kind, dump_question_field(question, kind))
    assert fresh == question


def test_question_info_on_disk(tmp_path):
    question = Question(info_id=3, user_id=1, title="Why?", content="Because.")
    question.add_answer(10)
    question.write_info(tmp_path)
    assert (tmp_path / "questions" / "title" / "3.txt").read_text(encoding="utf-8") == "Why?"
    assert (tmp_path / "questions" / "answerList" / "3.txt").exists()

    loaded = Question(info_id=3, user_id=1)
    loaded.read_info(tmp_path)
    assert loaded == question


def test_question_missing_files_give_defaults(tmp_path):
    question = Question(info_id=4, title="t", content="c", answers={1})
    question.read_info(tmp_path)
    assert question.title == ""
    assert question.content == ""
    assert question.answers == set()
    assert question.date_time == DEFAULT_MOMENT


def test_question_clear_answers():
    question = Question(answers={1, 2})
    question.clear_answers()
    assert question.answers == set()


def test_md5_known_values():
    assert md5_hex("") == "d41d8cd98f00b204e9800998ecf8427e"
    assert md5_hex("abc") == "900150983cd24fb0d6963f7d28e17f72"


def test_md5_non_latin_characters_become_question_marks():
    assert md5_hex("瞎扯") == md5_hex("??")