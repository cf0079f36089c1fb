"""Tests for the preview-pane lexer and theme."""

from pygments.token import Comment, Keyword, Name, Number, String
from rich.style import Style

from zsh_lexer import HistoryLexer, HistoryTheme


def tokens(code: str) -> list:
    return list(HistoryLexer().get_tokens(code))


class TestHistoryLexer:
    def test_history_expansion(self):
        toks = tokens("sudo !!")
        assert (Keyword, "sudo") in toks
        assert (Name.Variable.History, "!!") in toks

    def test_event_designators(self):
        for designator in ("!$", "!-2", "!42", "!git"):
            assert (Name.Variable.History, designator) in tokens(f"echo {designator}")

    def test_command_and_flags(self):
        toks = tokens('git commit -m "fix"')
        assert (Name.Function, "git") in toks
        assert (Name.Argument, "commit") in toks
        assert (Name.Attribute, "-m") in toks
        assert (String.Double, "fix") in toks

    def test_comment(self):
        toks = tokens("echo $HOME # where am i")
        assert (Name.Builtin, "echo") in toks
        assert (Name.Variable, "$HOME") in toks
        assert (Comment.Single, "# where am i") in toks

    def test_fc_newline_marker(self):
        assert (String.Escape, "\\n") in tokens("echo one\\necho two")

    def test_pipeline_restarts_command(self):
        toks = tokens("cat log | grep error")
        assert (Name.Function, "cat") in toks
        assert (Name.Function, "grep") in toks

    def test_number(self):
        assert (Number.Integer, "10") in tokens("sleep 10")

    def test_round_trips_text(self):
        code = "for f in *.py; do echo ${f%.py} $(date +%s); done\n"
        assert "".join(value for _, value in tokens(code)) == code


class TestHistoryTheme:
    def test_known_token(self):
        assert HistoryTheme.get_style_for_token(Name.Variable.History) == HistoryTheme.styles[Name.Variable.History]

    def test_falls_back_to_parent(self):
        assert HistoryTheme.get_style_for_token(Number.Hex) == HistoryTheme.styles[Number]

    def test_unknown_token_uses_default(self):
        assert HistoryTheme.get_style_for_token(Name.Decorator) == HistoryTheme.default_style

    def test_background(self):
        assert HistoryTheme.get_background_style() == Style(bgcolor="#282c34")
