"""Tests for the split family and its found / not-found / invalid outcomes."""

import pytest

from bytespan.errors import ViewArgumentError
from bytespan.models import EMPTY, INVALID, NOT_FOUND, ViewState
from bytespan.predicates import is_digit, is_space
from bytespan.split import SplitResult, split_at_char, split_by_not_pred, split_by_pred
from bytespan.view import from_buffer, from_cstr, is_not_found

v = from_cstr


class TestSplitAtChar:
    def test_key_value(self):
        before, after = split_at_char(v("key=value"), "=")
        assert bytes(before) == b"key"
        assert bytes(after) == b"=value"

    def test_not_found(self):
        before, after = split_at_char(v("no delimiter"), "=")
        assert is_not_found(before)
        assert is_not_found(after)

    def test_delimiter_at_start(self):
        before, after = split_at_char(v("=starts with"), "=")
        assert before.state is ViewState.EMPTY
        assert bytes(after) == b"=starts with"

    def test_delimiter_at_end(self):
        before, after = split_at_char(v("ends with="), "=")
        assert bytes(before) == b"ends with"
        assert bytes(after) == b"="

    def test_first_of_many(self):
        before, after = split_at_char(v("a=b=c"), "=")
        assert bytes(before) == b"a"
        assert bytes(after) == b"=b=c"

    def test_only_delimiter(self):
        before, after = split_at_char(v("="), "=")
        assert before == EMPTY
        assert bytes(after) == b"="

    def test_single_byte_not_found(self):
        assert split_at_char(v("a"), "=") == SplitResult(NOT_FOUND, NOT_FOUND)
        assert is_not_found(split_at_char(v("a"), "=").before)

    def test_empty_subject_not_found(self):
        before, after = split_at_char(EMPTY, "=")
        assert is_not_found(before)
        assert is_not_found(after)

    def test_invalid(self):
        assert split_at_char(INVALID, "=") == SplitResult(INVALID, INVALID)

    def test_halves_share_buffer(self):
        data = b"k:v"
        before, after = split_at_char(from_buffer(data), ":")
        assert before.buf is data
        assert after.buf is data
        assert after.offset == 1

    def test_named_fields(self):
        result = split_at_char(v("a,b"), ",")
        assert bytes(result.before) == b"a"
        assert bytes(result.after) == b",b"


class TestSplitByPred:
    def test_found(self):
        before, after = split_by_pred(v("abc123def"), is_digit)
        assert bytes(before) == b"abc"
        assert bytes(after) == b"123def"

    def test_match_at_start(self):
        before, after = split_by_pred(v("123abc"), is_digit)
        assert before == EMPTY
        assert bytes(after) == b"123abc"

    def test_not_found_returns_whole_and_empty_tail(self):
        s = from_buffer(b"xxabcdefxx", 6, offset=2)
        before, after = split_by_pred(s, is_digit)
        assert before == s
        assert after.state is ViewState.EMPTY
        assert after.buf is s.buf
        assert after.offset == s.offset + s.length

    def test_not_found_is_not_the_not_found_sentinel(self):
        before, after = split_by_pred(v("abc"), is_digit)
        assert not is_not_found(before)
        assert not is_not_found(after)

    def test_empty_subject(self):
        before, after = split_by_pred(EMPTY, is_digit)
        assert before is EMPTY
        assert after.state is ViewState.EMPTY

    def test_none_predicate(self):
        assert split_by_pred(v("abc"), None) == SplitResult(INVALID, INVALID)

    def test_invalid(self):
        before, after = split_by_pred(INVALID, is_digit)
        assert before is INVALID
        assert after is INVALID

    def test_non_callable_predicate(self):
        with pytest.raises(ViewArgumentError):
            split_by_pred(v("abc"), 3)


class TestSplitByNotPred:
    def test_found(self):
        before, after = split_by_not_pred(v("123abc"), is_digit)
        assert bytes(before) == b"123"
        assert bytes(after) == b"abc"

    def test_first_byte_does_not_match(self):
        before, after = split_by_not_pred(v("abcdef123"), is_digit)
        assert before == EMPTY
        assert bytes(after) == b"abcdef123"

    def test_all_match_is_not_found(self):
        before, after = split_by_not_pred(v("12345"), is_digit)
        assert is_not_found(before)
        assert is_not_found(after)

    def test_empty_subject_is_not_found(self):
        before, after = split_by_not_pred(EMPTY, is_space)
        assert is_not_found(before)
        assert is_not_found(after)

    def test_none_predicate(self):
        assert split_by_not_pred(v("abc"), None) == SplitResult(INVALID, INVALID)

    def test_invalid(self):
        before, after = split_by_not_pred(INVALID, is_digit)
        assert before is INVALID
        assert after is INVALID

    def test_tokenize_words(self):
        rest = v("alpha beta")
        word, rest = split_by_pred(rest, is_space)
        _, rest = split_by_not_pred(rest, is_space)
        assert bytes(word) == b"alpha"
        assert bytes(rest) == b"beta"
