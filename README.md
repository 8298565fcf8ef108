# qaforum

`qaforum` is the model behind a small question-and-answer forum. Users ask
questions, answer them, praise answers, follow other users and follow
questions. Every record is kept in a directory of plain text files, one small
file per record and field, so the state of the forum can be read and edited
by hand.

It has no dependencies beyond the standard library.

## Example

```python
from qaforum.records import md5_hex
from qaforum.session import Session
from qaforum.store import ForumStore

store = ForumStore("forum-data", user_ids={"alice": 0, "bob": 1})
store.load()  # missing files are read as defaults

session = Session(store, {0: md5_hex("password"), 1: md5_hex("password")})
session.login("alice", "password")

question_id = session.submit_question("How do I start?", "Some details.")
answer_id = session.submit_answer(question_id, "Like this.")
store.add_praiser(answer_id, 1)

print(session.search_titles("start"))  # [question_id]
session.sign_out()                     # writes everything back to forum-data
```

## Modules

- `qaforum.basicinfo`: `BasicInfo`, the abstract base of questions and
  answers: `info_id`, `user_id` (the author), `date_time` and `content`, with
  `read_info(data_dir)` and `write_info(data_dir)`.
- `qaforum.answer`: `Answer`, which also keeps the set of users who praised
  it (`praise_count`, `is_praised_by`, `add_praiser`, `delete_praiser`,
  `clear_praisers`). The module reads and writes the answer-to-question and
  answer-to-author index files (`read_answer_question_map`,
  `read_answer_user_map`, `write_answer_question_map`,
  `write_answer_user_map`, built on `read_id_map` and `write_id_map`).
- `qaforum.records`: `User` and `Question`, and the text format of every
  stored field. `UserField`, `AnswerField` and `QuestionField` name the
  folders a record is split into; `dump_user_field`, `load_user_field`,
  `dump_answer_field`, `load_answer_field`, `dump_question_field` and
  `load_question_field` turn a field into text and back. Times are stored as
  `year month day hour minute second` (`format_timestamp`,
  `parse_timestamp`). `md5_hex` gives the hex MD5 digest of the Latin-1 form
  of a string.
- `qaforum.userbook`: `UserBook`, every user of the forum. `load(names_to_ids)`
  reads the users named in a name-to-id mapping and `save()` writes them back.
  It answers questions about users (`user`, `user_name`, `user_statistics`,
  `is_following`, `is_following_question`, `fans`, `followees`,
  `questions_of`, `answers_of`, `followed_questions`) and changes them
  (`update_user`, `follow`, `unfollow`, `set_following`, `follow_question`,
  `unfollow_question`, `add_answer_of_user`, `add_question_of_user`).
  Unknown user ids raise `KeyError`.
- `qaforum.store`: `ForumStore`, the whole forum. It is given the data
  directory, a mapping of user names to ids and a mapping of question ids to
  their authors; `load()` reads users, questions, answers and the two answer
  index files, and `save()` writes them all back. It handles praises, attaches
  answers to questions, finds a user's answer to a question
  (`user_answer_to_question`, `None` if there is none), and orders ids newest
  first (`answers_by_time`, `questions_by_time`, `answer_list_of`) or most
  praised first (`answers_by_praise`).
- `qaforum.navigation`: the pages a front end can show (`Page`), the two
  modes of the side menu (`GuideMode.MINE` and `GuideMode.HIS`, with the
  menu captions from `guide_labels(mode)`), and `NavigationHistory`, the stack
  of `HistoryEntry` items behind a "back" button, including title searches and
  time-range searches. `retreat()` with a single page recorded leaves it in
  place and returns `None`.
- `qaforum.session`: `Session`, the signed-in user. Passwords are given as a
  mapping of user ids to MD5 hex digests. `login` strips the name and password
  and raises `LoginError` on a mismatch; actions that need a user raise
  `LoginError` when nobody is signed in. `submit_question` and `submit_answer`
  raise `EmptyContentError` when the title or the answer is blank; an answer
  to a question the user has already answered replaces the earlier one under
  the same id. `search_titles` and `search_between` find questions by title
  text or by creation time (inclusive), newest first. `sign_out` saves the
  store, clears the history and forgets the user.

## Data directory

Inside the data directory:

- `user/<field>/<id>.txt` for each user field: `personal information`
  (`gender year month day`), `personal introduction`, `answers`, `fans`,
  `concerners` (followed users), `questions`, `concern questions`;
- `questions/{answerList,title,detail,information}/<id>.txt`;
- `answers/{information,content,praisers}/<id>.txt`;
- `answerBelongToQuestion.txt` and `answerBelongToUser.txt`, one
  `answer-id other-id` pair per line.

Id sets are stored as a count on the first line followed by the ids. A
missing file is read as the field's default: gender 2, a birthday of
1 January 2000, a time of 12:00 on that day, no text, empty sets. A new forum
can therefore start from an empty directory.

## What it does not do

- There is no user interface and no command to run; the package is a library
  for a front end to build on.
- It does not store the user-name-to-id index, the passwords or the
  question-to-author index: these are handed to `ForumStore` and `Session` by
  the caller, and there is no sign-up.
- It keeps no avatars or other images.

## Tests

The tests use pytest and live in `tests/`:

```
pip install -e .[test]
pytest
```