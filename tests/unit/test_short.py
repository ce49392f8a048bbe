"""Tests for the short option scanner."""

from __future__ import annotations

from reopt import DONE, ERROR, MSG_INVALID, MSG_MISSING, ArgType, next_short
from reopt.short import argtype_of
from tests.helpers import make_state, unconsumed


class TestArgtypeOf:
    """Tests for argtype_of."""

    def test_plain_flag(self) -> None:
        assert argtype_of("abc", "b") is ArgType.NONE

    def test_required_flag(self) -> None:
        assert argtype_of("ab:c", "b") is ArgType.REQUIRED

    def test_optional_flag(self) -> None:
        assert argtype_of("ab::c", "b") is ArgType.OPTIONAL

    def test_last_flag_required(self) -> None:
        assert argtype_of("abc:", "c") is ArgType.REQUIRED

    def test_unknown_flag(self) -> None:
        assert argtype_of("abc", "z") is None

    def test_colon_is_never_a_flag(self) -> None:
        assert argtype_of("a:", ":") is None


class TestFlags:
    """Tests for flags without values."""

    def test_no_arguments(self) -> None:
        state = make_state()
        assert next_short(state, "abc") == DONE

    def test_single_flag(self) -> None:
        state = make_state("-a")
        assert next_short(state, "abc") == "a"
        assert state.last_argument is None
        assert next_short(state, "abc") == DONE

    def test_multiple_flags(self) -> None:
        state = make_state("-a", "-b", "-c")
        assert [next_short(state, "abc") for _ in range(4)] == ["a", "b", "c", DONE]

    def test_cluster(self) -> None:
        state = make_state("-abc")
        assert next_short(state, "abc") == "a"
        assert state.cluster_offset == 1
        assert state.cursor == 1
        assert next_short(state, "abc") == "b"
        assert next_short(state, "abc") == "c"
        assert state.cluster_offset == 0
        assert state.cursor == 2
        assert next_short(state, "abc") == DONE

    def test_repeated_flag_counts_each_occurrence(self) -> None:
        state = make_state("-eeeeee")
        count = 0
        while (code := next_short(state, "e")) != DONE:
            assert code == "e"
            count += 1
        assert count == 6

    def test_error_message_empty_on_success(self) -> None:
        state = make_state("-a")
        next_short(state, "a")
        assert state.error_message == ""

    def test_last_option_reports_flag(self) -> None:
        state = make_state("-b")
        next_short(state, "ab")
        assert state.last_option == "b"


class TestRequiredValues:
    """Tests for flags with required values."""

    def test_separate_token(self) -> None:
        state = make_state("-c", "red")
        assert next_short(state, "c:") == "c"
        assert state.last_argument == "red"
        assert state.cursor == 3
        assert next_short(state, "c:") == DONE

    def test_inline(self) -> None:
        state = make_state("-cred", "next")
        assert next_short(state, "c:") == "c"
        assert state.last_argument == "red"
        assert state.cursor == 2
        assert unconsumed(state) == ["next"]

    def test_cluster_with_inline_value(self) -> None:
        state = make_state("-abcblue")
        assert next_short(state, "abc:") == "a"
        assert next_short(state, "abc:") == "b"
        assert next_short(state, "abc:") == "c"
        assert state.last_argument == "blue"
        assert state.cluster_offset == 0

    def test_cluster_ending_in_required_takes_next_token(self) -> None:
        state = make_state("-ac", "red")
        assert next_short(state, "ac:") == "a"
        assert next_short(state, "ac:") == "c"
        assert state.last_argument == "red"

    def test_next_token_taken_even_if_it_looks_like_an_option(self) -> None:
        state = make_state("-c", "-a")
        assert next_short(state, "ac:") == "c"
        assert state.last_argument == "-a"
        assert next_short(state, "ac:") == DONE


class TestOptionalValues:
    """Tests for flags with optional values."""

    def test_inline_value(self) -> None:
        state = make_state("-d10")
        assert next_short(state, "d::") == "d"
        assert state.last_argument == "10"

    def test_separate_token_is_not_consumed(self) -> None:
        state = make_state("-d", "10")
        assert next_short(state, "d::") == "d"
        assert state.last_argument is None
        assert next_short(state, "d::") == DONE
        assert unconsumed(state) == ["10"]


class TestShortErrors:
    """Tests for in-band errors from the short scanner."""

    def test_unknown_option(self) -> None:
        state = make_state("-z")
        assert next_short(state, "abc") == ERROR
        assert state.error_message.startswith(MSG_INVALID)
        assert state.error_message == "invalid option -- 'z'"
        assert state.last_option == "z"
        assert state.cursor == 2

    def test_unknown_option_skips_rest_of_cluster(self) -> None:
        state = make_state("-azb", "-b")
        assert next_short(state, "ab") == "a"
        assert next_short(state, "ab") == ERROR
        assert state.cluster_offset == 0
        assert next_short(state, "ab") == "b"
        assert state.cursor == 3

    def test_missing_argument(self) -> None:
        state = make_state("-c")
        assert next_short(state, "c:") == ERROR
        assert state.error_message == "option requires an argument -- 'c'"
        assert state.error_message.startswith(MSG_MISSING)
        assert state.last_argument is None
        assert state.cursor == 2

    def test_empty_spec(self) -> None:
        state = make_state("-a")
        assert next_short(state, "") == ERROR

    def test_colon_option(self) -> None:
        state = make_state("-:")
        assert next_short(state, "a:") == ERROR
        assert state.error_message == "invalid option -- ':'"

    def test_error_cleared_by_next_call(self) -> None:
        state = make_state("-z", "-a")
        assert next_short(state, "a") == ERROR
        assert next_short(state, "a") == "a"
        assert state.error_message == ""


class TestShortTokenClassification:
    """Tests for tokens the short scanner does not treat as options."""

    def test_single_dash_is_positional(self) -> None:
        state = make_state("-")
        assert next_short(state, "a") == DONE
        assert unconsumed(state) == ["-"]

    def test_long_style_token_is_positional(self) -> None:
        state = make_state("--amend", "-a")
        assert next_short(state, "a") == "a"
        assert next_short(state, "a") == DONE
        assert unconsumed(state) == ["--amend"]

    def test_done_is_idempotent(self) -> None:
        state = make_state("-a", "foo")
        assert next_short(state, "a") == "a"
        for _ in range(3):
            assert next_short(state, "a") == DONE
            assert state.last_option is None
            assert state.last_argument is None
        assert state.tokens == ["prog", "-a", "foo"]
        assert unconsumed(state) == ["foo"]
