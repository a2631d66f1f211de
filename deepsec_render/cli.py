import argparse
import sys
from collections.abc import Sequence
from dataclasses import replace

from deepsec_render.config import Settings, configure_logging
from deepsec_render.errors import RenderError
from deepsec_render.query import QueryResult, load_query, render_attack, render_processes
from deepsec_render.report import render_report
from deepsec_render.result import Err, Ok
from deepsec_render.trace import BREAK_POINT, TraceLevel


def _load(path: str) -> QueryResult | None:
    match load_query(path):
        case Ok(query):
            return query
        case Err() as err:
            print(f"Could not load {path}: {err}", file=sys.stderr)
            return None


def handle_process(path: str, settings: Settings) -> int:
    """Print every process of a query, one listing after the other."""
    query = _load(path)
    if query is None:
        return 1
    listings = render_processes(
        query, indent=settings.indent, max_nesting=settings.max_nesting
    )
    for i, listing in enumerate(listings, 1):
        if len(listings) > 1:
            print(f"// Process {i}")
        sys.stdout.write(listing)
    return 0


def handle_trace(path: str, settings: Settings, *, wrap: bool) -> int:
    query = _load(path)
    if query is None:
        return 1
    trace = render_attack(query, settings.trace_level)
    if trace is None:
        print("No attack trace in this query.", file=sys.stderr)
        return 0
    if wrap:
        trace = trace.replace(BREAK_POINT, "\n")
    print(trace)
    return 0


def handle_report(path: str, settings: Settings) -> int:
    query = _load(path)
    if query is None:
        return 1
    sys.stdout.write(render_report(query, settings.trace_level, indent=settings.indent))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deepsec-render",
        description="Render processes and attack traces of verification query results",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: DEEPSEC_RENDER_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="Spaces per indentation level (default: DEEPSEC_RENDER_INDENT or 3).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    process_parser = subparsers.add_parser(
        "process", help="Print the processes of a query result file."
    )
    process_parser.add_argument("file", metavar="FILE", help="Query result JSON file.")

    level_choices = [lvl.value for lvl in TraceLevel]

    trace_parser = subparsers.add_parser(
        "trace", help="Print the attack trace of a query result file on one line."
    )
    trace_parser.add_argument("file", metavar="FILE", help="Query result JSON file.")
    trace_parser.add_argument(
        "--level",
        choices=level_choices,
        help="Which transitions to show (default: DEEPSEC_RENDER_TRACE_LEVEL or io).",
    )
    trace_parser.add_argument(
        "--wrap",
        action="store_true",
        default=False,
        help="Print one action per line instead of a single line.",
    )

    report_parser = subparsers.add_parser(
        "report", help="Print a full text report of a query result file."
    )
    report_parser.add_argument("file", metavar="FILE", help="Query result JSON file.")
    report_parser.add_argument(
        "--level",
        choices=level_choices,
        help="Which transitions of the attack trace to show.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    match Settings.from_env():
        case Ok(settings):
            pass
        case Err(e):
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 1

    overrides: dict[str, object] = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.indent is not None:
        overrides["indent_width"] = args.indent
    if getattr(args, "level", None):
        overrides["trace_level"] = TraceLevel(args.level)
    if overrides:
        settings = replace(settings, **overrides)  # type: ignore[arg-type]

    configure_logging(settings.log_level)

    try:
        match args.command:
            case "process":
                return handle_process(args.file, settings)
            case "trace":
                return handle_trace(args.file, settings, wrap=args.wrap)
            case "report":
                return handle_report(args.file, settings)
            case None:
                parser.print_help()
                return 1
            case _:
                print(f"Unknown command: {args.command}", file=sys.stderr)
                parser.print_help()
                return 1
    except RenderError as e:
        print(f"Rendering failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
