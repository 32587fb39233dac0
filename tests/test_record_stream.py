"""Tests for RecordStream token and line reading."""

import io

from ordertreelib import RecordStream


class TestReadToken:

    def test_tokens_across_lines(self):
        stream = RecordStream.from_text("1 2\n\n  3\t4\n")

        tokens = [stream.read_token() for _ in range(4)]

        assert tokens == ["1", "2", "3", "4"]
        assert not stream.eof

    def test_eof_set_only_by_failed_read(self):
        stream = RecordStream.from_text("last")

        assert stream.read_token() == "last"
        assert not stream.eof

        assert stream.read_token() is None
        assert stream.eof

    def test_reads_after_eof_keep_returning_none(self):
        stream = RecordStream.from_text("")

        assert stream.read_token() is None
        assert stream.read_token() is None
        assert stream.read_line() is None
        assert stream.eof

    def test_line_number_counts_physical_lines(self):
        stream = RecordStream.from_text("a\n\nb\n")

        stream.read_token()
        assert stream.line_number == 1
        stream.read_token()
        assert stream.line_number == 3


class TestReadLine:

    def test_lines_without_newlines(self):
        stream = RecordStream.from_text("first line\r\nsecond\n")

        assert stream.read_line() == "first line"
        assert stream.read_line() == "second"
        assert stream.read_line() is None
        assert stream.eof

    def test_blank_line_is_not_eof(self):
        stream = RecordStream.from_text("\nx\n")

        assert stream.read_line() == ""
        assert not stream.eof

    def test_line_after_token_returns_remainder(self):
        stream = RecordStream.from_text("42 the answer\nnext\n")

        assert stream.read_token() == "42"
        assert stream.read_line() == "the answer"
        assert stream.read_line() == "next"

    def test_line_after_last_token_on_line_is_empty(self):
        stream = RecordStream.from_text("42\nnext\n")

        assert stream.read_token() == "42"
        assert stream.read_line() == ""
        assert stream.read_line() == "next"

    def test_wraps_any_text_source(self):
        source = io.StringIO("a\n")
        stream = RecordStream(source)

        assert stream.source is source
        assert stream.read_line() == "a"


class TestPosition:

    def test_position_moves_with_every_read(self):
        stream = RecordStream.from_text("a b\nc\n")
        seen = [stream.position]

        stream.read_token()
        seen.append(stream.position)
        stream.read_token()
        seen.append(stream.position)
        stream.read_line()
        seen.append(stream.position)
        stream.read_token()
        seen.append(stream.position)
        stream.read_token()
        seen.append(stream.position)

        assert len(set(seen)) == len(seen)
        assert stream.eof

    def test_position_unchanged_without_reads(self):
        stream = RecordStream.from_text("a\n")
        assert stream.position == stream.position
        assert stream.position == (0, None, False)
