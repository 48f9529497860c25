from __future__ import annotations

from gridkit.breakpoints import Breakpoint, BreakpointRegistry, UnknownBreakpointError
from gridkit.context import DEFAULTS, ActiveMedia, CompilationContext, OptionalSettings, Settings
from gridkit.css import AtRule, Declaration, QualifiedRule, Stylesheet
from gridkit.grid import breakpoints, column, media, offset, pull, push, row, row_acts_as_wrapper, wrapper
from gridkit.ratio import (
    KEYWORDS,
    InvalidSpecError,
    Keyword,
    Numeric,
    Phrase,
    WidthSpec,
    percentage,
    resolve,
    width_spec,
)

__version__ = "0.1.0"

""" # Grid helpers

+ Widths:
    - Column count: `column(ctx, 4)` is 4 out of the context's total columns
    - Keyword: `column(ctx, "half")`
    - Phrase: `column(ctx, "1 out of 3")`, `column(ctx, "1/3")`

+ Roles:
    - Wrapper: centered, constrained to a max width
    - Row: clears its floated columns, negative gutter margins
    - Column: floated, padded by half a gutter on each side

+ Responsive:
    - Register breakpoints on the context
    - `media(ctx, "md", body)` wraps what body emits in a min-width query
"""
