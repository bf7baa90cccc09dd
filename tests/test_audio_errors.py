import pytest

from samurai_engine.audio_errors import Result, error_string


def test_ok_message():
    assert Result.OK.message() == "No errors."


def test_ok_is_zero():
    assert Result(0) is Result.OK


def test_file_not_found_message():
    assert error_string(Result.FILE_NOTFOUND) == "File not found."


def test_internal_keeps_original_wording():
    assert error_string(Result.INTERNAL).startswith("An error occured in the FMOD system.")


@pytest.mark.parametrize("code", [-1, 10_000])
def test_unknown_code(code):
    assert error_string(code) == "Unknown error."


@pytest.mark.parametrize("result", list(Result))
def test_every_result_has_its_own_message(result):
    assert result.message() != "Unknown error."
    assert error_string(int(result)) == result.message()


def test_messages_are_distinct():
    messages = [error_string(r) for r in Result]
    assert len(set(messages)) == len(messages)


def test_codes_are_contiguous_from_zero():
    looked_up = {Result(code) for code in range(len(Result))}
    assert looked_up == set(Result)