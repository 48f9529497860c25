"""gridkit: print the css a grid helper emits.

Usage: gridkit [options] <helper> [width] [params...]

Examples:
  gridkit column "1 out of 3" --selector .sidebar
  gridkit column half right
  gridkit --row-behavior wrapper row full
  gridkit --breakpoint md:768:720 --media md column 6
  gridkit --breakpoint sm:576:540 --breakpoint md:768:720 breakpoints
"""

from __future__ import annotations
import argparse
import logging
import re
import sys

from conterm.pretty import Markup

from gridkit import grid
from gridkit.breakpoints import UnknownBreakpointError
from gridkit.context import DEFAULTS, CompilationContext
from gridkit.css import Stylesheet
from gridkit.ratio import InvalidSpecError

WIDTH_HELPERS = ("column", "offset", "push", "pull")
HELPERS = ("row", "wrapper", *WIDTH_HELPERS, "breakpoints")

def _breakpoint(value: str) -> tuple[str, float, float | None]:
    """Parse `PREFIX:MIN[:MAX]`."""
    parts = value.split(":")
    if len(parts) not in (2, 3) or parts[0] == "":
        raise argparse.ArgumentTypeError(f"expected PREFIX:MIN[:MAX], got {value!r}")
    try:
        min_width = float(parts[1])
        max_width = float(parts[2]) if len(parts) == 3 else None
    except ValueError:
        raise argparse.ArgumentTypeError(f"breakpoint widths must be numbers, got {value!r}")
    return parts[0], min_width, max_width

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridkit",
        description="Print the css a grid helper emits.",
        epilog=__doc__.split("\n\n", 2)[2],
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--columns", type=int, default=DEFAULTS["total_columns"], help="Total grid columns")
    parser.add_argument("--gutter", type=float, default=DEFAULTS["gutter"], help="Gutter width")
    parser.add_argument("--max-width", type=float, default=DEFAULTS["max_width"], help="Wrapper max width")
    parser.add_argument("--unit", default=DEFAULTS["unit"], help="Unit for lengths")
    parser.add_argument(
        "--row-behavior",
        choices=["default", "wrapper"],
        default=DEFAULTS["default_row_behavior"],
        help="Let rows act as wrappers outside of media blocks",
    )
    parser.add_argument(
        "-b", "--breakpoint",
        action="append",
        type=_breakpoint,
        default=[],
        metavar="PREFIX:MIN[:MAX]",
        help="Register a breakpoint (repeatable)",
    )
    parser.add_argument("-m", "--media", metavar="PREFIX", help="Emit the rule inside this breakpoint")
    parser.add_argument("-s", "--selector", default=None, help="Selector for the emitted rule")
    parser.add_argument("--plain", action="store_true", help="Never colorize output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("helper", choices=HELPERS, help="Grid helper to run")
    parser.add_argument("args", nargs="*", help="Width (for width helpers) followed by flags")
    return parser

def build(args: argparse.Namespace) -> Stylesheet:
    ctx = CompilationContext({
        "total_columns": args.columns,
        "gutter": args.gutter,
        "max_width": args.max_width,
        "unit": args.unit,
        "default_row_behavior": args.row_behavior,
    })
    for prefix, min_width, max_width in args.breakpoint:
        ctx.register_breakpoint(prefix, min_width, max_width)

    stylesheet = Stylesheet()
    if args.helper == "breakpoints":
        for rule in grid.breakpoints(ctx, args.selector or ".wrapper"):
            stylesheet.insert_rule(rule)
        return stylesheet

    selector = args.selector or f".{args.helper}"
    helper = getattr(grid, args.helper)
    if args.helper in WIDTH_HELPERS and len(args.args) == 0:
        raise InvalidSpecError(f"{args.helper} needs a width")
    body = lambda: helper(ctx, *args.args)

    if args.media is not None:
        stylesheet.rule(selector, [grid.media(ctx, args.media, body)])
    else:
        stylesheet.rule(selector, body())
    return stylesheet

PROPERTY = re.compile(r"^(\s+)([\w-]+):", re.MULTILINE)
BLOCK = re.compile(r"^(\s*)([^\s{][^{]*?) \{$", re.MULTILINE)

def highlight(css: str) -> str:
    """Colorize serialized css with conterm markup."""
    css = css.replace("[", "\\[")
    css = BLOCK.sub(r"\1[bold yellow]\2[/] {", css)
    css = PROPERTY.sub(r"\1[cyan]\2[/]:", css)
    return Markup.parse(css)

def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.helper == "breakpoints" and args.media is not None:
        parser.error("--media can not be combined with breakpoints, which emits its own media rules")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        css = build(args).serialize()
    except (ValueError, UnknownBreakpointError) as error:
        print(f"gridkit: {error}", file=sys.stderr)
        return 1

    if args.plain or not sys.stdout.isatty():
        sys.stdout.write(css)
    else:
        sys.stdout.write(highlight(css))
    sys.stdout.flush()
    return 0

if __name__ == "__main__":
    sys.exit(main())
