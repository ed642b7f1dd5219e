"""Tests for rwenv.display"""

import io

import pytest

from rwenv.display import clip_value, format_environment, print_environment


class TestClipValue:
    """Tests for clip_value"""

    def test_short_value_untouched(self):
        assert clip_value("short") == "short"

    def test_value_at_threshold_untouched(self):
        value = "x" * 100
        assert clip_value(value) == value

    def test_long_value_clipped_to_head_and_tail(self):
        """49 characters each side of the ellipsis by default"""
        value = "H" * 60 + "T" * 60
        clipped = clip_value(value)
        assert clipped == "H" * 49 + "..." + "T" * 49

    def test_custom_threshold(self):
        assert clip_value("abcdefghijkl", max_value_len=10) == "abcd...ijkl"

    def test_smallest_threshold_that_clips(self):
        assert clip_value("abcdefghijkl", max_value_len=4) == "a...l"

    @pytest.mark.parametrize("max_value_len", [0, 1, 2, 3])
    def test_tiny_threshold_leaves_value_alone(self, max_value_len):
        """No head and tail fit, so the value is not mangled"""
        assert clip_value("abcdefghijkl", max_value_len=max_value_len) == "abcdefghijkl"


class TestFormatEnvironment:
    """Tests for format_environment"""

    def test_sorted_by_name(self):
        lines = format_environment({"ZED": "1", "ALPHA": "2", "MID": "3"})
        assert [line.split()[0] for line in lines] == ["ALPHA", "MID", "ZED"]

    def test_names_padded_to_align_equal_signs(self):
        lines = format_environment({"A": "1", "LONG_NAME": "2"})
        assert lines == [
            'A         = "1"',
            'LONG_NAME = "2"',
        ]
        assert len({line.index("=") for line in lines}) == 1

    def test_values_are_quoted_with_escapes(self):
        """Control characters stay on one line"""
        lines = format_environment({"A": 'say "hi"\n'})
        assert lines == ['A = "say \\"hi\\"\\n"']

    def test_non_ascii_kept(self):
        assert format_environment({"A": "héllo"}) == ['A = "héllo"']

    def test_undecodable_bytes_shown_as_hex_escapes(self):
        """Values from non-UTF-8 bytes carry surrogates; they print as \\xNN"""
        value = b"x\xffy".decode("utf-8", "surrogateescape")
        assert format_environment({"A": value}) == ['A = "x\\xffy"']

    def test_undecodable_bytes_distinct_from_literal_backslash(self):
        lines = format_environment({"A": "\udcff", "B": "\\xff"})
        assert lines == ['A = "\\xff"', 'B = "\\\\xff"']

    def test_undecodable_name_escaped(self):
        assert format_environment({"N\udce9": "1"}) == ['N\\xe9 = "1"']

    def test_lone_surrogate_escaped(self):
        assert format_environment({"A": "\ud800"}) == ['A = "\\ud800"']

    def test_clipping_enabled_by_default(self):
        lines = format_environment({"A": "x" * 200})
        assert "..." in lines[0]

    def test_clipping_can_be_disabled(self):
        lines = format_environment({"A": "x" * 200}, clip=False)
        assert lines == ['A = "' + "x" * 200 + '"']

    def test_empty_environment(self):
        assert format_environment({}) == []


class TestPrintEnvironment:
    """Tests for print_environment"""

    def test_writes_one_line_per_var(self):
        out = io.StringIO()
        print_environment({"B": "2", "A": "1"}, stream=out)
        assert out.getvalue() == 'A = "1"\nB = "2"\n'

    def test_defaults_to_stdout(self, capsys):
        print_environment({"A": "1"})
        assert capsys.readouterr().out == 'A = "1"\n'

    def test_passes_clip_settings(self):
        out = io.StringIO()
        print_environment({"A": "abcdefghijkl"}, stream=out, max_value_len=10)
        assert out.getvalue() == 'A = "abcd...ijkl"\n'

    def test_undecodable_value_on_strict_utf8_stream(self):
        """A strict UTF-8 stdout accepts the escaped listing"""
        raw = io.BytesIO()
        out = io.TextIOWrapper(raw, encoding="utf-8", errors="strict")
        print_environment({"A": "caf\udce9"}, stream=out)
        out.flush()
        assert raw.getvalue() == b'A = "caf\\xe9"\n'
