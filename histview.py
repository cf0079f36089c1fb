#!/usr/bin/env python3
"""
histview.py - Fuzzy zsh history browser backed by fzf

**How the pieces fit**

A single invocation is a straight pipeline that runs once and exits:

1.  **Source:** A `HistorySource` yields raw `fc -l` style lines, newest first.
    Either the zsh widget pipes `fc -lrf -1000` into us, or we read `$HISTFILE`
    ourselves and render its EXTENDED_HISTORY entries the same way.
2.  **Format:** `format_candidates()` drops malformed lines, keeps only the most
    recent occurrence of each command, and lays the rest out in fixed columns
    under a header row.
3.  **Select:** `FzfSelector` hands the candidates to fzf (multi-select, frozen
    header, `ctrl-x` as the "execute" key) and returns whatever fzf printed.
4.  **Dispatch:** `dispatch()` reads the pressed key from the first line, strips
    the ID/DATE/TIME columns off the selected rows, and returns an `EditBuffer`
    or `ExecuteBuffer` outcome, or `None` when there is nothing to do.
5.  **Bridge:** The outcome applies itself to a `ShellBridge`. The `ZleBridge`
    replies to the zsh widget printed by `histview init zsh`, which then sets
    `BUFFER` and either redisplays or accepts the line.

Only a missing fzf is reported to the user. Cancelling fzf, selecting nothing
and unparsable history lines all end quietly without touching the buffer.

Usage
-----
    eval "$(histview init zsh)"          # in ~/.zshrc, binds Ctrl+L
    fc -lrf -1000 | histview select      # what the widget runs
    histview format --histfile ~/.zsh_history | less
"""

from __future__ import annotations

import argparse
import itertools
import os
import re
import shlex
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Mapping, TextIO

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.theme import Theme

from zsh_lexer import HistoryLexer, HistoryTheme

__version__ = "0.3.0"

# ============================================================================
# CONFIGURATION & CONSTANTS
# ============================================================================

CUSTOM_THEME = Theme({
    "info": "#61AFEF",
    "success": "#98C379",
    "warning": "#E5C07B",
    "error": "#E06C75",
    "context": "#5C6370",
})

console = Console(stderr=True, theme=CUSTOM_THEME)

DEFAULT_LIMIT = 1000
DEFAULT_EXECUTE_KEY = "ctrl-x"
DEFAULT_BINDKEY = "^L"
DEFAULT_FZF_BINARY = "fzf"
FZF_PROMPT = "󰍉 > "

# printf "%-8s %-7s %-7s %s"
COLUMN_FORMAT = "{:<8} {:<7} {:<7} {}"
HEADER_LINE = COLUMN_FORMAT.format("ID", "DATE", "TIME", "COMMAND")
MIN_FIELDS = 4

# Regex patterns
RECORD_ID_RE = re.compile(r"^[0-9]+$")
CANDIDATE_COLUMNS_RE = re.compile(r"^\s*[0-9]+\s+[0-9/]+\s+[0-9:]{5}\s+")
HISTORY_ENTRY_RE = re.compile(r"^: *(\d+):\d+;")

FC_TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M"


@dataclass
class Config:
    """Settings for one invocation. Environment first, command-line flags on top."""

    limit: int = DEFAULT_LIMIT
    execute_key: str = DEFAULT_EXECUTE_KEY
    fzf_binary: str = DEFAULT_FZF_BINARY
    fzf_extra_opts: list[str] = field(default_factory=list)
    preview: bool = False
    verbose: bool = False

    @property
    def header_hint(self) -> str:
        """→ The fzf header line, naming the execute key the way users type it"""
        key_label = self.execute_key.upper().replace("-", "+")
        return f"[Tab] to Select, [Enter] to Edit, [{key_label}] to Execute"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """→ Builds a Config from HISTVIEW_* variables, ignoring unusable values"""
        if environ is None:
            environ = os.environ
        config = cls()

        if raw_limit := environ.get("HISTVIEW_LIMIT"):
            try:
                limit = int(raw_limit)
            except ValueError:
                limit = 0
            if limit > 0:
                config.limit = limit
            else:
                _console_print(
                    f"[warning]Ignoring HISTVIEW_LIMIT={escape(raw_limit)!r}; "
                    f"using {DEFAULT_LIMIT}[/warning]"
                )

        if fzf_binary := environ.get("HISTVIEW_FZF"):
            config.fzf_binary = fzf_binary
        if extra_opts := environ.get("HISTVIEW_FZF_OPTS"):
            try:
                config.fzf_extra_opts = shlex.split(extra_opts)
            except ValueError as e:
                _console_print(
                    f"[warning]Ignoring HISTVIEW_FZF_OPTS={escape(extra_opts)!r}: {escape(str(e))}[/warning]"
                )
        config.preview = environ.get("HISTVIEW_PREVIEW", "").lower() in ("1", "true", "yes", "on")
        return config

    def update_from_args(self, args: argparse.Namespace) -> None:
        """→ Lets explicit command-line flags win over the environment"""
        if getattr(args, "limit", None) is not None:
            self.limit = args.limit
        if getattr(args, "expect_key", None):
            self.execute_key = args.expect_key
        if getattr(args, "preview", None) is not None:
            self.preview = args.preview
        if getattr(args, "verbose", False):
            self.verbose = True


# ============================================================================
# ERRORS
# ============================================================================


class HistviewError(Exception):
    """Base class for failures that abort an invocation with a message."""


class SelectorNotFoundError(HistviewError):
    """The fzf executable could not be found on PATH."""

    def __init__(self, binary: str):
        self.binary = binary
        super().__init__(
            f"{binary} is not installed. Please run 'brew install fzf' (macOS) "
            f"or install it for your system to use the history viewer."
        )


class HistoryFileError(HistviewError):
    """The history file exists but could not be read."""


# ============================================================================
# DATA STRUCTURES
# ============================================================================


@dataclass(frozen=True)
class HistoryRecord:
    """One parsed `fc -l` line."""

    id: int
    date: str
    time: str
    command: str

    def to_candidate(self) -> str:
        return COLUMN_FORMAT.format(self.id, self.date, self.time, self.command)


@dataclass
class FormatStats:
    """Counters filled in while formatting, reported in verbose mode."""

    raw: int = 0
    malformed: int = 0
    duplicates: int = 0
    emitted: int = 0


class PressedKey(Enum):
    DEFAULT = "default"
    EXECUTE = "execute"


@dataclass(frozen=True)
class SelectionResult:
    pressed_key: PressedKey
    selected_commands: list[str]


class ShellBridge(ABC):
    """Writes a chosen command back into the host shell's line editor."""

    @abstractmethod
    def place_in_edit_buffer(self, text: str) -> None:
        """Replace the input buffer with `text`, leaving it uncommitted."""
        raise NotImplementedError

    @abstractmethod
    def execute_immediately(self, text: str) -> None:
        """Replace the input buffer with `text` and run it."""
        raise NotImplementedError


class ZleBridge(ShellBridge):
    """
    Replies to the zsh widget from `histview init zsh` over stdout.

    The reply is the action word (`edit` or `execute`), a newline, then the
    buffer text. The widget captures it with `$(...)`, so nothing else may be
    written to stdout during `histview select`.
    """

    EDIT = "edit"
    EXECUTE = "execute"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def place_in_edit_buffer(self, text: str) -> None:
        self._reply(self.EDIT, text)

    def execute_immediately(self, text: str) -> None:
        self._reply(self.EXECUTE, text)

    def _reply(self, action: str, text: str) -> None:
        self.stream.write(f"{action}\n{text}")
        self.stream.flush()


class DispatchOutcome(ABC):
    """What to do with the selected command text."""

    text: str

    @abstractmethod
    def apply(self, bridge: ShellBridge) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class EditBuffer(DispatchOutcome):
    text: str

    def apply(self, bridge: ShellBridge) -> None:
        bridge.place_in_edit_buffer(self.text)


@dataclass(frozen=True)
class ExecuteBuffer(DispatchOutcome):
    text: str

    def apply(self, bridge: ShellBridge) -> None:
        bridge.execute_immediately(self.text)


# ============================================================================
# CONSOLE OUTPUT
# ============================================================================


def _console_print(string="", *args, **kwargs) -> None:
    """→ Safe console printing with fallback"""
    try:
        console.print(string, *args, **kwargs)
    except Exception:
        kwargs_clean = {k: v for k, v in kwargs.items() if k in ("sep", "end", "flush")}
        print(string, *args, file=sys.stderr, **kwargs_clean)


def _debug(config: Config, message: str) -> None:
    """→ Verbose-only diagnostics, dimmed, on stderr"""
    if config.verbose:
        _console_print(f"[context]{message}[/context]")


# ============================================================================
# HISTORY SOURCES
# ============================================================================


class HistorySource(ABC):
    """Yields raw `<id> <date> <time> <command>` lines, newest first."""

    @abstractmethod
    def lines(self, limit: int = DEFAULT_LIMIT) -> Iterator[str]:
        raise NotImplementedError


class StreamHistorySource(HistorySource):
    """Lines the host already produced, e.g. `fc -lrf -1000` piped to stdin."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def lines(self, limit: int = DEFAULT_LIMIT) -> Iterator[str]:
        for line in itertools.islice(self.stream, limit):
            yield line.rstrip("\n")


class HistfileHistorySource(HistorySource):
    """
    Reads a zsh EXTENDED_HISTORY file and renders it the way `fc -lrf` does.

    Entries are numbered 1..N in file order, so newer entries have larger ids.
    Entries without a `: <epoch>:<elapsed>;` prefix carry no timestamp and are
    skipped. Embedded newlines are shown as a literal `\\n`, as `fc -l` shows them.
    """

    def __init__(self, path: Path):
        self.path = path

    def lines(self, limit: int = DEFAULT_LIMIT) -> Iterator[str]:
        all_lines = read_history_file(self.path)
        if not all_lines:
            return
        numbered_entries = list(enumerate(parse_history_entries(all_lines), 1))
        for number, entry_block in reversed(numbered_entries[-limit:]):
            fc_line = entry_to_fc_line(number, entry_block)
            if fc_line is not None:
                yield fc_line


def default_histfile(environ: Mapping[str, str] | None = None) -> Path:
    if environ is None:
        environ = os.environ
    return Path(environ.get("HISTFILE") or Path.home() / ".zsh_history").expanduser()


def read_history_file(file_path: Path) -> list[str]:
    """→ File I/O: Reads the history file; a missing file is just empty history"""
    try:
        return file_path.read_text(errors="ignore").splitlines()
    except FileNotFoundError:
        _console_print(f"[warning]No history file at '{escape(str(file_path))}'[/warning]")
        return []
    except OSError as e:
        raise HistoryFileError(f"Error reading file '{file_path}': {e}") from e


def parse_history_entries(all_lines: list[str]) -> Iterator[list[str]]:
    """→ Groups history lines into entry blocks; continuation lines join the entry above"""
    i = 0
    num_lines = len(all_lines)
    while i < num_lines:
        if HISTORY_ENTRY_RE.match(all_lines[i]):
            j = i + 1
            while j < num_lines and not HISTORY_ENTRY_RE.match(all_lines[j]):
                j += 1
            yield all_lines[i:j]
            i = j
        else:
            yield [all_lines[i]]
            i += 1


def entry_to_fc_line(number: int, entry_block: list[str]) -> str | None:
    """→ Renders one EXTENDED_HISTORY entry as an `fc -lf` line, or None if it has no usable timestamp"""
    match = HISTORY_ENTRY_RE.match(entry_block[0])
    if not match:
        return None
    # zsh stores multi-line commands with a trailing backslash before each newline
    parts = [entry_block[0][match.end():]] + entry_block[1:]
    parts = [part[:-1] if part.endswith("\\") else part for part in parts[:-1]] + parts[-1:]
    command = "\\n".join(parts)
    try:
        stamp = datetime.fromtimestamp(int(match.group(1))).strftime(FC_TIMESTAMP_FORMAT)
    except (OverflowError, OSError, ValueError):
        # Corrupted epoch; treat like an entry without a timestamp
        return None
    return f"{number:>5}  {stamp}  {command}"


def resolve_history_source(
    histfile: str | Path | None = None,
    stdin: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> HistorySource:
    """→ Explicit file, else piped stdin, else $HISTFILE"""
    if histfile:
        return HistfileHistorySource(Path(histfile).expanduser())
    if stdin is not None and not stdin.isatty():
        return StreamHistorySource(stdin)
    return HistfileHistorySource(default_histfile(environ))


def fetch_recent_history(limit: int = DEFAULT_LIMIT, source: HistorySource | None = None) -> Iterator[str]:
    """→ The last `limit` history lines, newest first"""
    if source is None:
        source = resolve_history_source(stdin=sys.stdin)
    return source.lines(limit)


# ============================================================================
# FORMATTING & DEDUPLICATION
# ============================================================================


def shorten_date(full_date: str) -> str:
    """09/04/2025 → 09/04. Dates without a slash pass through."""
    return full_date.rsplit("/", 1)[0]


def parse_history_line(line: str) -> HistoryRecord | None:
    """→ Parses `<id> <date> <time> <command...>`, or None for a malformed line"""
    parts = line.split()
    if len(parts) < MIN_FIELDS:
        return None
    record_id, full_date, time_of_day = parts[:3]
    if not RECORD_ID_RE.match(record_id):
        return None
    return HistoryRecord(
        id=int(record_id),
        date=shorten_date(full_date),
        time=time_of_day,
        command=" ".join(parts[3:]),
    )


def format_candidates(raw_lines: Iterable[str], stats: FormatStats | None = None) -> Iterator[str]:
    """
    → Header row, then one column-aligned row per distinct command.

    Input is newest first, so the first time a command shows up is its most
    recent use; every later (older) copy is dropped. Output keeps input order.
    """
    if stats is None:
        stats = FormatStats()
    yield HEADER_LINE

    seen_commands: set[str] = set()
    for line in raw_lines:
        stats.raw += 1
        record = parse_history_line(line)
        if record is None:
            stats.malformed += 1
            continue
        if record.command in seen_commands:
            stats.duplicates += 1
            continue
        seen_commands.add(record.command)
        stats.emitted += 1
        yield record.to_candidate()


# ============================================================================
# SELECTOR (fzf)
# ============================================================================


class FzfSelector:
    """Runs fzf over the candidates and returns its raw stdout."""

    # fzf exit statuses
    NO_MATCH = 1
    ERROR = 2
    INTERRUPTED = 130

    def __init__(self, config: Config):
        self.config = config

    def locate(self) -> str:
        """→ Path to the fzf executable; raises SelectorNotFoundError if there is none"""
        binary = shutil.which(self.config.fzf_binary)
        if binary is None:
            raise SelectorNotFoundError(self.config.fzf_binary)
        return binary

    def build_command(self, binary: str, query: str = "") -> list[str]:
        command = [
            binary,
            "--height", "100%",
            "--border",
            "--prompt", FZF_PROMPT,
            "--header", self.config.header_hint,
            "--query", query,
            f"--expect={self.config.execute_key}",
            "--multi",
            "--header-lines=1",
        ]
        if self.config.preview:
            command += [
                "--preview", preview_command(),
                "--preview-window", "down:5:wrap",
            ]
        command += self.config.fzf_extra_opts
        return command

    def select(self, candidates: list[str], query: str = "") -> str:
        """→ Blocks until the user confirms or aborts; an abort returns ''"""
        command = self.build_command(self.locate(), query)
        completed = subprocess.run(
            command,
            input="".join(f"{candidate}\n" for candidate in candidates),
            stdout=subprocess.PIPE,
            text=True,
        )
        if completed.returncode == 0:
            return completed.stdout
        if completed.returncode == self.ERROR:
            _debug(self.config, f"fzf failed with exit status {completed.returncode}")
        else:
            _debug(self.config, "fzf cancelled")
        return ""


# ============================================================================
# RESULT PARSING & DISPATCH
# ============================================================================


def strip_columns(line: str) -> str:
    """→ Recovers the command from a candidate row; rows that don't fit the columns pass through"""
    return CANDIDATE_COLUMNS_RE.sub("", line, count=1)


def parse_selection(raw_output: str, execute_key: str = DEFAULT_EXECUTE_KEY) -> SelectionResult | None:
    """→ Splits fzf output into (pressed key, selected commands), or None if nothing was chosen"""
    if not raw_output:
        return None
    key_line, _, rest = raw_output.partition("\n")
    selected_lines = rest.split("\n")
    if selected_lines[-1] == "":
        selected_lines.pop()
    if not selected_lines:
        return None
    pressed_key = PressedKey.EXECUTE if key_line == execute_key else PressedKey.DEFAULT
    return SelectionResult(
        pressed_key=pressed_key,
        selected_commands=[strip_columns(line) for line in selected_lines],
    )


def dispatch(raw_output: str, execute_key: str = DEFAULT_EXECUTE_KEY) -> DispatchOutcome | None:
    """→ Edit or execute the selected command(s); None means leave the buffer alone"""
    selection = parse_selection(raw_output, execute_key)
    if selection is None:
        return None
    command = "\n".join(selection.selected_commands).rstrip("\n")
    if not command:
        return None
    if selection.pressed_key is PressedKey.EXECUTE:
        return ExecuteBuffer(command)
    return EditBuffer(command)


def run_pipeline(
    raw_lines: Iterable[str],
    query: str,
    config: Config,
    selector: FzfSelector | None = None,
    bridge: ShellBridge | None = None,
) -> DispatchOutcome | None:
    """→ Format, select, dispatch and apply. Returns the applied outcome, if any."""
    if selector is None:
        selector = FzfSelector(config)
    # Fail closed before reading history or touching the buffer
    selector.locate()

    stats = FormatStats()
    candidates = list(format_candidates(raw_lines, stats))
    _debug(
        config,
        f"{stats.raw} history lines: {stats.emitted} shown, "
        f"{stats.duplicates} duplicates, {stats.malformed} malformed",
    )

    outcome = dispatch(selector.select(candidates, query), config.execute_key)
    if outcome is None:
        _debug(config, "Nothing selected; buffer unchanged")
        return None

    outcome.apply(bridge if bridge is not None else ZleBridge())
    return outcome


# ============================================================================
# PREVIEW
# ============================================================================


def preview_command() -> str:
    """→ The shell command fzf runs for the preview pane; fzf substitutes the quoted row for {}"""
    return f"{shlex.quote(sys.executable)} -m histview preview {{}}"


def render_preview(line: str, target: Console | None = None) -> None:
    """→ Prints the row's command, syntax-highlighted"""
    if target is None:
        target = Console(force_terminal=True)
    command = strip_columns(line)
    syntax = Syntax(command, HistoryLexer(), theme=HistoryTheme(), line_numbers=False, word_wrap=True)
    target.print(syntax)


# ============================================================================
# ZSH INTEGRATION
# ============================================================================

ZSH_WIDGET_TEMPLATE = r"""# histview: fuzzy history browser. Load with: eval "$(histview init zsh)"
_histview_widget() {
  local out errfile=${TMPDIR:-/tmp}/histview.$$.err
  out=$(fc -lrf -@LIMIT@ | @COMMAND@ select --limit @LIMIT@ --query="$BUFFER" 2>"$errfile")
  if [[ -z "$out" ]]; then
    zle reset-prompt
    # Show failures such as a missing fzf below the prompt
    [[ -s "$errfile" ]] && zle -M "$(<"$errfile")"
    rm -f "$errfile"
    return
  fi
  rm -f "$errfile"
  BUFFER=${out#*$'\n'}
  CURSOR=${#BUFFER}
  if [[ ${out%%$'\n'*} == execute ]]; then
    zle accept-line
  else
    zle redisplay
  fi
}

# Re-bind before every prompt so other plugins can't take the key over
_histview_ensure_binding() {
  zle -N histview-widget _histview_widget
  bindkey @KEY@ histview-widget
}

if (( ! ${precmd_functions[(I)_histview_ensure_binding]} )); then
  precmd_functions+=(_histview_ensure_binding)
fi
"""


def zsh_widget_script(key: str = DEFAULT_BINDKEY, limit: int = DEFAULT_LIMIT, command: str | None = None) -> str:
    """→ The zsh snippet that defines the widget and keeps it bound"""
    if command is None:
        command = f"{shlex.quote(sys.executable)} -m histview"
    return (
        ZSH_WIDGET_TEMPLATE
        .replace("@LIMIT@", str(limit))
        .replace("@COMMAND@", command)
        .replace("@KEY@", shlex.quote(key))
    )


# ============================================================================
# COMMAND LINE
# ============================================================================


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Print diagnostics to stderr")

    history = argparse.ArgumentParser(add_help=False)
    history.add_argument(
        "--limit",
        type=_positive_int,
        help=f"How many recent history entries to read (default {DEFAULT_LIMIT})",
    )
    history.add_argument(
        "--histfile",
        metavar="FILE",
        help="Read this EXTENDED_HISTORY file instead of stdin / $HISTFILE",
    )

    ap = argparse.ArgumentParser(
        prog="histview",
        description="Fuzzy-search zsh history with fzf and edit or run the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = ap.add_subparsers(dest="command", required=True)

    select_ap = subparsers.add_parser(
        "select", parents=[common, history], help="Pick from history and reply to the zsh widget"
    )
    select_ap.add_argument("--query", default="", help="Initial fzf query (usually $BUFFER)")
    select_ap.add_argument(
        "--expect-key",
        metavar="KEY",
        help=f"fzf key that executes instead of editing (default {DEFAULT_EXECUTE_KEY})",
    )
    select_ap.add_argument(
        "--preview",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show a syntax-highlighted preview pane",
    )
    select_ap.set_defaults(handler=_cmd_select)

    format_ap = subparsers.add_parser(
        "format", parents=[common, history], help="Print the deduplicated candidate list"
    )
    format_ap.set_defaults(handler=_cmd_format)

    preview_ap = subparsers.add_parser("preview", parents=[common], help="Highlight one candidate row")
    preview_ap.add_argument("line", help="A row as shown in fzf")
    preview_ap.set_defaults(handler=_cmd_preview)

    init_ap = subparsers.add_parser("init", parents=[common], help="Print the shell integration snippet")
    init_ap.add_argument("shell", choices=["zsh"])
    init_ap.add_argument("--key", default=DEFAULT_BINDKEY, help=f"bindkey sequence (default {DEFAULT_BINDKEY})")
    init_ap.add_argument("--limit", type=_positive_int, help="Entries passed from fc")
    init_ap.set_defaults(handler=_cmd_init)

    return ap


def _cmd_select(args: argparse.Namespace, config: Config) -> int:
    source = resolve_history_source(args.histfile, sys.stdin)
    run_pipeline(fetch_recent_history(config.limit, source), args.query, config)
    return 0


def _cmd_format(args: argparse.Namespace, config: Config) -> int:
    source = resolve_history_source(args.histfile, sys.stdin)
    stats = FormatStats()
    out = sys.stdout
    try:
        for candidate in format_candidates(fetch_recent_history(config.limit, source), stats):
            out.write(candidate + "\n")
        out.flush()
    except BrokenPipeError:
        # Downstream consumer closed early (e.g., piped to `head`). Exit cleanly.
        return 0
    _debug(config, f"{stats.emitted} candidates from {stats.raw} history lines")
    return 0


def _cmd_preview(args: argparse.Namespace, config: Config) -> int:
    render_preview(args.line)
    return 0


def _cmd_init(args: argparse.Namespace, config: Config) -> int:
    sys.stdout.write(zsh_widget_script(key=args.key, limit=config.limit))
    return 0


def main(argv: list[str] | None = None) -> int:
    """→ Main: parses flags, layers them over the environment, runs a subcommand"""
    args = build_parser().parse_args(argv)
    config = Config.from_env()
    config.update_from_args(args)
    try:
        return args.handler(args, config)
    except HistviewError as e:
        _console_print(f"[error]{escape(str(e))}[/error]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
