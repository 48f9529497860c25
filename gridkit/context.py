"""Compilation state shared by the grid helpers.

A `CompilationContext` holds the grid settings, the breakpoint registry and
the active media flag. The flag is only set inside a media scope:

    ctx = CompilationContext({"default_row_behavior": "wrapper"})
    ctx.register_breakpoint("md", 768, 720)

    with ctx.media("md") as breakpoint:
        assert ctx.active_media
    assert not ctx.active_media
"""

from __future__ import annotations
from collections.abc import Callable
import logging
from typing import Literal, TypedDict, TypeVar

from gridkit.breakpoints import Breakpoint, BreakpointRegistry

__all__ = [
    "RowBehavior",
    "Settings",
    "OptionalSettings",
    "DEFAULTS",
    "default_settings",
    "ActiveMedia",
    "CompilationContext",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
RowBehavior = Literal["default", "wrapper"]
ROW_BEHAVIORS = ("default", "wrapper")

class Settings(TypedDict):
    total_columns: int
    gutter: int | float
    max_width: int | float
    unit: str
    default_row_behavior: RowBehavior

class OptionalSettings(TypedDict, total=False):
    total_columns: int
    gutter: int | float
    max_width: int | float
    unit: str
    default_row_behavior: RowBehavior

DEFAULTS: OptionalSettings = {
    "total_columns": 12,
    "gutter": 30,
    "max_width": 1200,
    "unit": "px",
    "default_row_behavior": "default",
}

def default_settings(origin: OptionalSettings | dict) -> Settings:
    for key, value in DEFAULTS.items():
        origin[key] = origin.get(key, value)
    return origin

def _check_row_behavior(behavior: str):
    if behavior not in ROW_BEHAVIORS:
        raise ValueError(
            f"Unknown default row behavior {behavior!r}, expected one of {', '.join(ROW_BEHAVIORS)}"
        )

class ActiveMedia:
    """Sets the context's active media flag for the extent of a `with` block.

    The previous value is restored on exit, whether or not the block raised.
    """

    __slots__ = ("context", "breakpoint", "_previous_")

    def __init__(self, context: CompilationContext, breakpoint: Breakpoint):
        self.context = context
        self.breakpoint = breakpoint
        self._previous_ = False

    def __enter__(self) -> Breakpoint:
        self._previous_ = self.context.active_media
        self.context.active_media = True
        logger.debug("entered media scope %r", self.breakpoint.prefix)
        return self.breakpoint

    def __exit__(self, *_) -> None:
        self.context.active_media = self._previous_
        logger.debug("left media scope %r", self.breakpoint.prefix)

class CompilationContext:
    settings: Settings

    def __init__(
        self,
        settings: OptionalSettings | None = None,
        *,
        registry: BreakpointRegistry | None = None,
    ):
        self.settings = default_settings(dict(settings or {}))
        if self.settings["total_columns"] <= 0:
            raise ValueError(f"Total columns must be greater than 0, got {self.settings['total_columns']}")
        if self.settings["gutter"] < 0:
            raise ValueError(f"Gutter can not be negative, got {self.settings['gutter']}")
        if self.settings["max_width"] < 0:
            raise ValueError(f"Max width can not be negative, got {self.settings['max_width']}")
        _check_row_behavior(self.settings["default_row_behavior"])

        self.registry = registry if registry is not None else BreakpointRegistry()
        self.active_media = False

    @property
    def total_columns(self) -> int:
        return self.settings["total_columns"]

    @property
    def gutter(self) -> int | float:
        return self.settings["gutter"]

    @property
    def max_width(self) -> int | float:
        return self.settings["max_width"]

    @property
    def unit(self) -> str:
        return self.settings["unit"]

    @property
    def default_row_behavior(self) -> RowBehavior:
        return self.settings["default_row_behavior"]

    @default_row_behavior.setter
    def default_row_behavior(self, behavior: RowBehavior):
        _check_row_behavior(behavior)
        self.settings["default_row_behavior"] = behavior

    def register_breakpoint(
        self,
        prefix: str,
        min_width: int | float = 0,
        max_wrapper_width: int | float | None = None,
    ) -> Breakpoint:
        return self.registry.register(prefix, min_width, max_wrapper_width)

    def media(self, prefix: str) -> ActiveMedia:
        """Guard activating media for the breakpoint registered under `prefix`.

        Raises
            UnknownBreakpointError: Nothing is registered under `prefix`.
        """
        return ActiveMedia(self, self.registry.get(prefix))

    def with_active_media(self, prefix: str, body: Callable[[], T]) -> T:
        """Call `body` with the active media flag set and return its result."""
        with self.media(prefix):
            return body()

    def __repr__(self) -> str:
        return f"CompilationContext({self.settings}, active_media={self.active_media})"
