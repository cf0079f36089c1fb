# ============================================================================
# ZSH HISTORY LEXER
# ============================================================================

from __future__ import annotations

import re

from pygments.lexer import RegexLexer, bygroups, include
from pygments.token import (
    Comment,
    Error,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Text,
    Token,
)
from rich.style import Style
from rich.syntax import SyntaxTheme

# Custom token types so Rich and Pygments know about them
Name.Argument = Token.Name.Argument
Name.Variable.Magic = Token.Name.Variable.Magic
Name.Variable.History = Token.Name.Variable.History
Keyword.Type = Token.Keyword.Type

# Words that run the next word as the actual command
PRECOMMAND_MODIFIERS = ("sudo", "noglob", "nocorrect", "command", "builtin", "exec", "time", "env")


class HistoryLexer(RegexLexer):
    """
    A Z-shell lexer tuned for single history entries as shown by `fc -l`.

    Besides the usual words, strings and expansions it understands history
    event designators (`!!`, `!$`, `!-2`, `!git`) and literal `\\n` markers
    that `fc` prints in place of embedded newlines.
    ```python
    syntax = Syntax("sudo !!", HistoryLexer(), theme=HistoryTheme())
    ```
    """

    name = "Z-shell history"
    aliases = ["zsh-history"]
    filenames = []

    flags = re.MULTILINE | re.DOTALL

    tokens = {
        "_expansions": [
            (r"\\n", String.Escape),
            (r"\\.", String.Escape),
            (r"!(?:!|\$|\^|\*|-?\d+|[a-zA-Z_][\w./-]*)(?::[a-zA-Z0-9&$^*-]+)*", Name.Variable.History),
            # Arithmetic before command substitution
            (r"\$\(\(", Operator, "arithmetic"),
            (r"\$\(", String.Interpol, "subshell"),
            (r"`", String.Backtick, "backtick"),
            (r"\$\{", Name.Variable.Magic, "parameter"),
            (r"\$[a-zA-Z0-9_@*#?$!~-]+", Name.Variable),
            (r"\$'(?:\\.|[^'\\])*'", String.Single),
            (r"'[^']*'", String.Single),
            (r'"', String.Double, "dquote"),
        ],
        "root": [
            (r"\s+", Text),
            (r"#.*?$", Comment.Single),
            (r"(<<<|<<-?|>>?|<&|>&|&>>?)|[0-9]*[<>]", Operator),
            (r"\|\|?|&&|&!|&\||&", Operator),
            (r"[;()\[\]{}]", Punctuation),
            (r"\b(if|fi|else|elif|then|for|in|while|until|do|done|case|esac|function|select|repeat)\b", Keyword.Reserved),
            (r"(%s)(\s+)" % "|".join(PRECOMMAND_MODIFIERS), bygroups(Keyword, Text)),
            (r"\b(echo|print|printf|cd|pwd|export|unset|local|typeset|source|alias|exit|return|fc|history|bindkey|zle)\b", Name.Builtin, "args"),
            (r"([a-zA-Z_][a-zA-Z0-9_]*)(=)", bygroups(Name.Variable, Operator)),
            (r"\b[0-9]+\b", Number.Integer),
            include("_expansions"),
            (r"[~a-zA-Z0-9_./+:@%-]+", Name.Function, "args"),
            (r".", Error),
        ],
        "args": [
            (r"\n", Text, "#pop"),
            (r"(?=#)", Text, "#pop"),
            (r"(?=\|\|?|&&|;)", Text, "#pop"),
            (r"&", Punctuation, "#pop"),
            (r"[ \t]+", Text),
            (r"(?:--?|\+)[a-zA-Z0-9][\w-]*", Name.Attribute),
            (r"=", Operator),
            (r"[0-9]*(<<<|<<-?|>>?|<&|>&)", Operator),
            (r"\b[0-9]+\b", Number.Integer),
            (r"(?=\))", Text, "#pop"),
            include("_expansions"),
            (r"\([#.:^a-zA-Z0-9/@*+-]+\)", Keyword.Type),
            (r"[^=\s;&|(){}<>\[\]!$`'\"\\]+", Name.Argument),
            (r"[(){}<>\[\]]", Punctuation),
        ],
        "dquote": [
            (r'"', String.Double, "#pop"),
            (r'\\(["$`\\])', String.Escape),
            include("_expansions"),
            (r'[^"\\$`!]+', String.Double),
            (r"[$!`]", String.Double),
        ],
        "backtick": [
            (r"`", String.Backtick, "#pop"),
            (r"[^`]+", String.Backtick),
        ],
        "subshell": [
            (r"\)", String.Interpol, "#pop"),
            include("root"),
        ],
        "arithmetic": [
            (r"\)\)", Operator, "#pop"),
            (r"[-+*/%&|<>!=^]+", Operator.Word),
            (r"\b[0-9]+\b", Number.Integer),
            (r"[a-zA-Z_][a-zA-Z0-9_]*", Name.Variable),
            (r"\s+", Text),
        ],
        "parameter": [
            (r"\}", Name.Variable.Magic, "#pop"),
            (r"\$\{", Name.Variable.Magic, "#push"),
            (r"(\([#@=a-zA-Z:?^]+\))([a-zA-Z_][a-zA-Z0-9_]*)", bygroups(Keyword.Type, Name.Variable)),
            (r"[a-zA-Z_][a-zA-Z0-9_]*", Name.Variable),
            (r"[#%/:|~^=+-]+", Operator),
            (r"[^}]+", Text),
        ],
    }


class HistoryTheme(SyntaxTheme):
    """Rich syntax theme for the fzf preview pane, One Dark palette."""

    _BACKGROUND = "#282c34"
    _FOREGROUND = "#abb2bf"
    _RED = "#E06C75"
    _GREEN = "#98C379"
    _YELLOW = "#E5C07B"
    _BLUE = "#61AFEF"
    _MAGENTA = "#C678DD"
    _CYAN = "#56B6C2"
    _GRAY = "#5C6370"

    background_color = _BACKGROUND
    default_style = Style(color=_FOREGROUND)

    styles = {
        Name.Function: Style(color=_BLUE, bold=True),
        Name.Attribute: Style(color=_YELLOW),
        Name.Argument: Style(color=_FOREGROUND),
        Name.Builtin: Style(color=_CYAN, italic=True),
        Name.Variable: Style(color=_RED),
        Name.Variable.Magic: Style(color=_MAGENTA),
        Name.Variable.History: Style(color=_MAGENTA, bold=True, underline=True),
        Keyword: Style(color=_MAGENTA, bold=True),
        Keyword.Reserved: Style(color=_MAGENTA, bold=True),
        Keyword.Type: Style(color=_CYAN, italic=True),
        Number: Style(color=_YELLOW),
        Number.Integer: Style(color=_YELLOW),
        Operator: Style(color=_CYAN),
        Operator.Word: Style(color=_CYAN),
        Punctuation: Style(color=_FOREGROUND),
        String: Style(color=_GREEN),
        String.Single: Style(color=_GREEN),
        String.Double: Style(color=_GREEN),
        String.Backtick: Style(color=_GREEN, italic=True),
        String.Escape: Style(color=_CYAN),
        String.Interpol: Style(color=_MAGENTA, bold=True),
        Comment: Style(color=_GRAY, italic=True),
        Comment.Single: Style(color=_GRAY, italic=True),
        Text: Style(color=_FOREGROUND),
        Error: Style(color=_RED, bold=True),
    }

    @classmethod
    def get_style_for_token(cls, t):
        # Fall back through parent token types, e.g. String.Double -> String
        while t not in cls.styles and t.parent is not None:
            t = t.parent
        return cls.styles.get(t, cls.default_style)

    @classmethod
    def get_background_style(cls):
        return Style(bgcolor=cls._BACKGROUND)
