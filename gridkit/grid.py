"""Grid style helpers.

Each helper returns the components of a css block: declarations, plus nested
rules where a helper needs them (the clearfix on rows and wrappers). Flags are
passed as extra string params:

    column(ctx, "1 out of 3", "right")
    row(ctx, "full")
    wrapper(ctx, "collapse")

Recognised flags are `full`, `collapse`, `center` and `right`. Unknown flags
are ignored.
"""

from __future__ import annotations
from collections.abc import Callable
import logging

from gridkit.context import CompilationContext
from gridkit.css import AtRule, Component, Declaration, QualifiedRule, length
from gridkit.ratio import Keyword, Numeric, Phrase, percentage, resolve, width_spec

__all__ = [
    "Width",
    "clearfix",
    "wrapper",
    "row",
    "row_acts_as_wrapper",
    "column",
    "offset",
    "push",
    "pull",
    "media",
    "breakpoints",
]

logger = logging.getLogger(__name__)

Width = Numeric | Keyword | Phrase | int | float | str

def _ratio(ctx: CompilationContext, width: Width, total: int | float | None) -> str:
    return percentage(resolve(width_spec(width), total if total is not None else ctx.total_columns))

def _half_gutter(ctx: CompilationContext, sign: int = 1) -> str:
    return length(sign * ctx.gutter / 2, ctx.unit)

def clearfix() -> QualifiedRule:
    return QualifiedRule("&::after", [
        Declaration("content", '""'),
        Declaration("display", "table"),
        Declaration("clear", "both"),
    ])

def wrapper(ctx: CompilationContext, *params: str, max_width: int | float | None = None) -> list[Component]:
    """Center content and constrain it to the max width, unless `full` is passed."""
    block: list[Component] = [
        Declaration("margin-left", "auto"),
        Declaration("margin-right", "auto"),
    ]
    if "full" not in params:
        block.append(Declaration("max-width", length(max_width if max_width is not None else ctx.max_width, ctx.unit)))
    if "collapse" not in params:
        block.extend([
            Declaration("padding-left", _half_gutter(ctx)),
            Declaration("padding-right", _half_gutter(ctx)),
        ])
    block.append(clearfix())
    return block

def row_acts_as_wrapper(ctx: CompilationContext) -> bool:
    """Rows fall back to wrapper centering with the `wrapper` row behavior, outside media blocks."""
    return ctx.default_row_behavior == "wrapper" and not ctx.active_media

def row(ctx: CompilationContext, *params: str) -> list[Component]:
    if row_acts_as_wrapper(ctx):
        logger.debug("row falls back to wrapper behavior")
        block: list[Component] = [
            Declaration("margin-left", "auto"),
            Declaration("margin-right", "auto"),
        ]
        if "full" not in params:
            block.append(Declaration("max-width", length(ctx.max_width, ctx.unit)))
    elif "collapse" in params:
        block = [
            Declaration("margin-left", "0"),
            Declaration("margin-right", "0"),
        ]
    else:
        block = [
            Declaration("margin-left", _half_gutter(ctx, -1)),
            Declaration("margin-right", _half_gutter(ctx, -1)),
        ]
    block.append(clearfix())
    return block

def column(
    ctx: CompilationContext,
    width: Width,
    *params: str,
    total: int | float | None = None,
) -> list[Component]:
    """A column `width` wide out of `total` columns, which defaults to the context's total."""
    block: list[Component] = []
    if "center" in params:
        block.extend([
            Declaration("float", "none"),
            Declaration("display", "block"),
            Declaration("margin-left", "auto"),
            Declaration("margin-right", "auto"),
        ])
    else:
        block.append(Declaration("float", "right" if "right" in params else "left"))
    block.append(Declaration("width", _ratio(ctx, width, total)))
    if "collapse" not in params:
        block.extend([
            Declaration("padding-left", _half_gutter(ctx)),
            Declaration("padding-right", _half_gutter(ctx)),
        ])
    return block

def offset(ctx: CompilationContext, width: Width, *params: str, total: int | float | None = None) -> list[Component]:
    side = "margin-right" if "right" in params else "margin-left"
    return [Declaration(side, _ratio(ctx, width, total))]

def push(ctx: CompilationContext, width: Width, *params: str, total: int | float | None = None) -> list[Component]:
    return [
        Declaration("position", "relative"),
        Declaration("left", _ratio(ctx, width, total)),
    ]

def pull(ctx: CompilationContext, width: Width, *params: str, total: int | float | None = None) -> list[Component]:
    return [
        Declaration("position", "relative"),
        Declaration("right", _ratio(ctx, width, total)),
    ]

def media(ctx: CompilationContext, prefix: str, body: Callable[[], list[Component]]) -> AtRule:
    """A `@media` block for the breakpoint `prefix` holding what `body` emits.

    The body runs with the context's active media flag set.
    """
    with ctx.media(prefix) as breakpoint:
        return AtRule("media", breakpoint.condition(ctx.unit), body())

def breakpoints(ctx: CompilationContext, selector: str = ".wrapper") -> list[AtRule]:
    """Max width media rules for every breakpoint with a wrapper width, in registration order."""
    return [
        AtRule("media", breakpoint.condition(ctx.unit), [
            QualifiedRule(selector, [
                Declaration("max-width", length(breakpoint.max_wrapper_width, ctx.unit)),
            ]),
        ])
        for breakpoint in ctx.registry
        if breakpoint.max_wrapper_width is not None
    ]
