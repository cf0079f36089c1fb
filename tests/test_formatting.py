"""Tests for parsing, deduplicating and laying out history lines."""

from histview import (
    HEADER_LINE,
    FormatStats,
    HistoryRecord,
    format_candidates,
    parse_history_line,
    shorten_date,
    strip_columns,
)


def row(record_id: str, date: str, time: str, command: str) -> str:
    return f"{record_id:<8} {date:<7} {time:<7} {command}"


class TestHeader:
    def test_header_columns(self):
        assert HEADER_LINE == "ID       DATE    TIME    COMMAND"

    def test_empty_input_gives_header_only(self):
        assert list(format_candidates([])) == [HEADER_LINE]


class TestShortenDate:
    def test_strips_year(self):
        assert shorten_date("09/04/2025") == "09/04"

    def test_no_slash_passes_through(self):
        assert shorten_date("2025-09-04") == "2025-09-04"

    def test_only_last_component_removed(self):
        assert shorten_date("9/4") == "9"


class TestParseHistoryLine:
    def test_basic_line(self):
        record = parse_history_line("  42  09/04/2025 11:51  git status")
        assert record == HistoryRecord(id=42, date="09/04", time="11:51", command="git status")

    def test_three_tokens_is_malformed(self):
        assert parse_history_line("7 09/04/2025 11:51") is None

    def test_non_numeric_id_is_malformed(self):
        assert parse_history_line("x7 09/04/2025 11:51 ls") is None

    def test_whitespace_runs_collapse(self):
        record = parse_history_line("3 09/04/2025 11:52 echo   a\tb")
        assert record.command == "echo a b"

    def test_quotes_and_pipes_survive(self):
        record = parse_history_line("""5 09/04/2025 11:52 grep "a|b" file | wc -l""")
        assert record.command == 'grep "a|b" file | wc -l'


class TestFormatCandidates:
    def test_duplicate_keeps_newest(self):
        raw = ["2 09/04/2025 11:52 ls -la", "1 09/04/2025 11:51 ls -la"]
        assert list(format_candidates(raw)) == [
            HEADER_LINE,
            "2" + " " * 8 + "09/04" + " " * 3 + "11:52" + " " * 3 + "ls -la",
        ]

    def test_duplicate_group_keeps_max_id(self):
        raw = [
            "30 09/04/2025 12:00 make test",
            "29 09/04/2025 11:59 vim x.py",
            "20 09/04/2025 11:00 make test",
            "10 09/03/2025 10:00 make test",
        ]
        candidates = list(format_candidates(raw))
        make_rows = [c for c in candidates if c.endswith("make test")]
        assert make_rows == [row("30", "09/04", "12:00", "make test")]

    def test_order_follows_input(self):
        raw = [
            "3 09/04/2025 11:53 c",
            "2 09/04/2025 11:52 b",
            "1 09/04/2025 11:51 a",
        ]
        commands = [strip_columns(c) for c in list(format_candidates(raw))[1:]]
        assert commands == ["c", "b", "a"]

    def test_malformed_lines_dropped_silently(self):
        raw = ["7 09/04/2025", "", "abc 09/04/2025 11:51 ls", "8 09/04/2025 11:52 pwd"]
        assert list(format_candidates(raw)) == [HEADER_LINE, row("8", "09/04", "11:52", "pwd")]

    def test_rejected_id_does_not_hide_older_copy(self):
        raw = ["x 09/04/2025 11:52 ls", "1 09/04/2025 11:50 ls"]
        assert list(format_candidates(raw)) == [HEADER_LINE, row("1", "09/04", "11:50", "ls")]

    def test_comparison_is_exact(self):
        raw = ["2 09/04/2025 11:52 ls -la", "1 09/04/2025 11:51 ls -LA"]
        assert len(list(format_candidates(raw))) == 3

    def test_long_fields_are_not_truncated(self):
        raw = ["123456789 2025-09-04 11:52 ls"]
        assert list(format_candidates(raw))[1] == "123456789 2025-09-04 11:52   ls"

    def test_idempotent(self):
        raw = [
            "4 09/04/2025 11:54 git push",
            "3 09/04/2025 11:53 git commit -m 'x y'",
            "2 09/04/2025 11:52 git push",
            "1 09/04",
        ]
        assert "\n".join(format_candidates(raw)) == "\n".join(format_candidates(raw))

    def test_accepts_a_generator(self):
        raw = (f"{i} 09/04/2025 11:5{i} cmd{i}" for i in range(3, 0, -1))
        assert len(list(format_candidates(raw))) == 4

    def test_stats(self):
        stats = FormatStats()
        raw = [
            "3 09/04/2025 11:53 ls",
            "2 09/04/2025 11:52 ls",
            "1 09/04",
        ]
        list(format_candidates(raw, stats))
        assert stats == FormatStats(raw=3, malformed=1, duplicates=1, emitted=1)


class TestRoundTrip:
    COMMANDS = [
        "ls -la",
        "echo 'a|b' | tr '|' ' '",
        'git commit -m "fix: handle 09/04 11:52 dates"',
        "1 2/3 12:34 looks like columns",
        "for f in *.py; do wc -l $f; done",
        "cd ~",
    ]

    def test_strip_recovers_command(self):
        for command in self.COMMANDS:
            record = HistoryRecord(id=1234, date="12/31", time="23:59", command=command)
            assert strip_columns(record.to_candidate()) == command

    def test_through_the_formatter(self):
        raw = [f"{100 - i} 01/02/2024 09:0{i} {c}" for i, c in enumerate(self.COMMANDS)]
        recovered = [strip_columns(c) for c in list(format_candidates(raw))[1:]]
        assert recovered == self.COMMANDS

    def test_unrecognised_date_is_left_in_place(self):
        record = HistoryRecord(id=1, date="2025-09-04", time="11:52", command="ls")
        assert strip_columns(record.to_candidate()) == record.to_candidate()
