import pytest
from sqlalchemy.exc import OperationalError

from honyaku.models.answer_history import AnswerHistory
from honyaku.services.answer_service import AnswerService, normalize_answer


@pytest.mark.parametrize("raw, expected", [
    ("  I Don't Have Time.  ", "i don't have time."),
    ("\tHello\n", "hello"),
    ("", ""),
])
def test_normalize_answer(raw, expected):
    assert normalize_answer(raw) == expected


def test_normalize_keeps_punctuation():
    assert normalize_answer("I don't have time") != normalize_answer("I don't have time.")


def test_correct_answer_is_case_and_whitespace_insensitive(db_session, make_sentence):
    sentence = make_sentence()

    result = AnswerService(db_session).check_answer(sentence.id, "I Don't Have Time.  ")

    assert result["is_correct"] is True
    assert result["correct_answer"] == "I don't have time."

    rows = db_session.query(AnswerHistory).all()
    assert len(rows) == 1
    assert rows[0].is_correct is True
    assert rows[0].incorrect_answer == ""


def test_wrong_answer_is_stored_verbatim(db_session, make_sentence):
    sentence = make_sentence()

    result = AnswerService(db_session).check_answer(sentence.id, "  I have no time. ")

    assert result["is_correct"] is False
    rows = db_session.query(AnswerHistory).all()
    assert len(rows) == 1
    assert rows[0].is_correct is False
    assert rows[0].incorrect_answer == "  I have no time. "


def test_histories_are_prior_wrong_answers_newest_first(db_session, make_sentence, add_answers):
    sentence = make_sentence()
    add_answers(sentence, correct=1, incorrect=["first", "second"])

    result = AnswerService(db_session).check_answer(sentence.id, "third")

    assert [h["incorrect_answer"] for h in result["histories"]] == ["second", "first"]
    assert db_session.query(AnswerHistory).filter_by(incorrect_answer="third").count() == 1


def test_histories_ignore_other_sentences(db_session, make_sentence, add_answers):
    sentence = make_sentence()
    other = make_sentence(japanese="今日は暑いです。", english="It's hot today.")
    add_answers(other, incorrect=["Hot today"])

    result = AnswerService(db_session).check_answer(sentence.id, "I don't have time.")

    assert result["histories"] == []


def test_repeated_submissions_create_repeated_rows(db_session, make_sentence):
    sentence = make_sentence()
    service = AnswerService(db_session)

    service.check_answer(sentence.id, "nope")
    second = service.check_answer(sentence.id, "nope")

    assert [h["incorrect_answer"] for h in second["histories"]] == ["nope"]
    assert db_session.query(AnswerHistory).count() == 2


def test_unknown_sentence_returns_none_without_insert(db_session):
    assert AnswerService(db_session).check_answer(999999, "anything") is None
    assert db_session.query(AnswerHistory).count() == 0


def test_history_insert_failure_still_returns_verdict(db_session, make_sentence, monkeypatch):
    sentence = make_sentence()
    service = AnswerService(db_session)

    def broken_insert(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(service.history_repo, "create_history", broken_insert)

    result = service.check_answer(sentence.id, "i don't have time.")

    assert result["is_correct"] is True
    assert db_session.query(AnswerHistory).count() == 0
