"""Named responsive breakpoints.

Breakpoints are kept in registration order. Lookups scan that order and the
first breakpoint with a matching prefix wins, so registering a prefix twice
leaves the later entry unreachable through `lookup` and `get`. The later entry
is still emitted by `gridkit.grid.breakpoints`, where it overrides the earlier
one by cascade.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Iterable, Iterator

from gridkit.css import length

__all__ = ["Breakpoint", "BreakpointRegistry", "UnknownBreakpointError"]

logger = logging.getLogger(__name__)

class UnknownBreakpointError(LookupError): pass

@dataclass(frozen=True)
class Breakpoint:
    prefix: str
    min_width: int | float = 0
    max_wrapper_width: int | float | None = None

    def __post_init__(self):
        if self.min_width < 0:
            raise ValueError(f"Breakpoint {self.prefix!r} min width can not be negative, got {self.min_width}")
        if self.max_wrapper_width is not None and self.max_wrapper_width < 0:
            raise ValueError(
                f"Breakpoint {self.prefix!r} max wrapper width can not be negative, got {self.max_wrapper_width}"
            )

    def condition(self, unit: str = "px") -> str:
        """The media query condition, e.g. `(min-width: 768px)`."""
        return f"(min-width: {length(self.min_width, unit)})"

class BreakpointRegistry:
    def __init__(self, breakpoints: Iterable[Breakpoint] | None = None) -> None:
        self._breakpoints_: list[Breakpoint] = list(breakpoints or [])

    @staticmethod
    def with_defaults() -> BreakpointRegistry:
        """Registry holding the `sm`, `md`, `lg` and `xl` breakpoints."""
        registry = BreakpointRegistry()
        registry.register("sm", 576, 540)
        registry.register("md", 768, 720)
        registry.register("lg", 992, 960)
        registry.register("xl", 1200, 1140)
        return registry

    def register(
        self,
        prefix: str,
        min_width: int | float = 0,
        max_wrapper_width: int | float | None = None,
    ) -> Breakpoint:
        breakpoint = Breakpoint(prefix, min_width, max_wrapper_width)
        if prefix in self:
            logger.warning(
                "breakpoint %r is already registered; lookups keep returning the first one",
                prefix,
            )
        self._breakpoints_.append(breakpoint)
        logger.debug("registered breakpoint %r", breakpoint)
        return breakpoint

    def lookup(self, prefix: str) -> Breakpoint | None:
        """First breakpoint registered under `prefix`, or None."""
        for breakpoint in self._breakpoints_:
            if breakpoint.prefix == prefix:
                return breakpoint
        return None

    def get(self, prefix: str) -> Breakpoint:
        if (breakpoint := self.lookup(prefix)) is None:
            available = ", ".join(bp.prefix for bp in self._breakpoints_) or "none"
            raise UnknownBreakpointError(f"Unknown breakpoint: {prefix}. Available: {available}")
        return breakpoint

    def __contains__(self, prefix: object) -> bool:
        return any(breakpoint.prefix == prefix for breakpoint in self._breakpoints_)

    def __iter__(self) -> Iterator[Breakpoint]:
        yield from self._breakpoints_

    def __len__(self) -> int:
        return len(self._breakpoints_)

    def __repr__(self) -> str:
        return f"BreakpointRegistry({self._breakpoints_})"
