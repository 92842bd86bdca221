"""EnvirRepl — interactive inspector for inferred environment values.

Also provides the ``envir-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping
from typing import IO, Sequence

from .builder import build_value
from .snapshot import Snapshot, Source
from .values import (
    Value,
    VArray,
    VBool,
    VFloat,
    VInt,
    VIpAddr,
    VSocketAddr,
    VText,
    _Empty,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# EnvirRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class EnvirRepl:
    """Evaluates literals and ``$NAME`` lookups against a snapshot.

    Usage::

        repl = EnvirRepl({"PORT": "8080"})
        repl.eval("0x1F")        # → VInt(31, "0x1F")
        repl.eval("$PORT")       # → VInt(8080, "8080")
        repl.eval("$NOPE")       # → Empty

        repl.snapshot            # the current Snapshot
        repl.reset()             # rebuild from the source
    """

    def __init__(self, source: Source | None = None, prefix: str = "") -> None:
        # One-shot iterables are kept as a list so reset() can replay them.
        if source is not None and not isinstance(source, Mapping):
            source = list(source)
        self._source = source
        self.prefix = prefix
        self.snapshot = Snapshot.build(source)

    def eval(self, text: str) -> Value | _Empty:
        """Infer *text*, or look up ``$NAME`` in the snapshot."""
        if text.startswith("$") and len(text) > 1:
            return self.snapshot.get(text[1:])
        return build_value(text)

    def reset(self) -> None:
        """Replace the snapshot with a freshly built one."""
        self.snapshot = Snapshot.build(self._source)


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _kind(value: Value) -> str:
    return type(value).__name__


def _fmt_inline(value: Value | _Empty) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, _Empty):
        return "Empty"
    if isinstance(value, VText):
        return f'"{value.raw}"'
    if isinstance(value, VBool):
        return "true" if value.value else "false"
    if isinstance(value, (VInt, VFloat)):
        return repr(value.value)
    if isinstance(value, (VSocketAddr, VIpAddr)):
        return str(value.value)
    if isinstance(value, VArray):
        return "[" + ", ".join(_fmt_inline(v) for v in value.items) + "]"
    return repr(value)


def _fmt_inspect(value: Value | _Empty, indent: int = 0) -> str:
    """Pretty-print a value for inspect() / i()."""
    if isinstance(value, _Empty):
        return "Empty"

    pad = "  " * indent
    if isinstance(value, VArray):
        lines = [f"VArray {value.raw!r} ["]
        for i, v in enumerate(value.items, 1):
            lines.append(f"{pad}  {i}: {_fmt_inspect(v, indent + 1)}")
        lines.append(f"{pad}]")
        return "\n".join(lines)

    return f"{_kind(value)} {_fmt_inline(value)}"


def _eval_expr(repl: EnvirRepl, expr: str, dest: IO[str]) -> None:
    """Evaluate *expr* and print the result to *dest*."""
    print(str(repl.eval(expr)), file=dest)


def _inspect_expr(repl: EnvirRepl, expr: str, dest: IO[str]) -> None:
    """Evaluate *expr* and pretty-print to *dest*."""
    print(_fmt_inspect(repl.eval(expr)), file=dest)


def _show_vars(repl: EnvirRepl, dest: IO[str]) -> None:
    """Print snapshot entries whose names start with the repl's prefix."""
    entries = {k: v for k, v in repl.snapshot.items() if k.startswith(repl.prefix)}
    if not entries:
        print("  (no variables defined)", file=dest)
        return
    width = max(len(k) for k in entries)
    for name in sorted(entries):
        value = entries[name]
        print(f"  ${name:<{width}} : {_kind(value):<11} {_fmt_inline(value)}", file=dest)


def _run_batch(repl: EnvirRepl, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(repl, file_line.rstrip("\n"), dest)
    except OSError as exc:
        logger.debug("batch file %r unreadable", filepath, exc_info=exc)
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _process_line(repl: EnvirRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":vars":
        _show_vars(repl, dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if line.startswith(prefix) and line.endswith(")"):
            expr = line[len(prefix):-1].strip()
            _inspect_expr(repl, expr, dest)
            return True

    # ── ? expression ──────────────────────────────────────────────────────
    if line.startswith("? "):
        _eval_expr(repl, line[2:].strip(), dest)
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _run_batch(repl, line[4:].strip(), dest)
        return True

    # ── Bare text: inspect it ─────────────────────────────────────────────
    _inspect_expr(repl, line, dest)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envir-repl",
        description="Inspect how environment values are inferred.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--prefix",
        default="",
        help="only list variables whose names start with PREFIX in :vars",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Interactive shell (``envir-repl`` / ``python -m envir_core``)."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    repl = EnvirRepl(prefix=args.prefix)
    dest: IO[str] = sys.stdout
    _file: IO[str] | None = None

    print("envir REPL  (:q to quit  |  :vars  :reset  |  ? <text>  inspect(<text>)  $NAME)")

    while True:
        try:
            line = input("ENV> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not line:
            continue

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        if line.startswith("?>> "):
            filepath = line[4:].strip()
            if _file:
                _file.close()
                _file = None
            try:
                _file = open(filepath, "w", encoding="utf-8")
                dest = _file
            except OSError as exc:
                dest = sys.stdout
                print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
            continue

        if line == "?>>":
            if _file:
                _file.close()
                _file = None
            dest = sys.stdout
            continue

        if not _process_line(repl, line, dest):
            break

    if _file:
        _file.close()


if __name__ == "__main__":
    main()
