"""CSS rule nodes and serialization.

Rules may nest the way css nesting allows:

    QualifiedRule(".row", [
        Declaration("margin-left", "-15px"),
        QualifiedRule("&::after", [Declaration("clear", "both")]),
    ])

Serializing flattens nested rules (`&` is replaced by the parent selector, or
the parent selector is prepended as a descendant) and bubbles nested at-rules
to the top, wrapping their declarations in the parent selector.
"""

from __future__ import annotations
from typing import Optional

__all__ = [
    "Declaration",
    "QualifiedRule",
    "AtRule",
    "Stylesheet",
    "Component",
    "length",
]

def length(value: int | float, unit: str = "px") -> str:
    """Format a css length. Zero is unitless and integral floats drop the fraction."""
    value = round(value, 4)
    if value == 0:
        return "0"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}{unit}"

class Declaration:
    important: bool
    name: str
    value: str
    def __init__(self, name: str, value: str, important: bool = False):
        self.name = name
        self.value = value
        self.important = important

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Declaration):
            return (
                self.name == __value.name
                and self.value == __value.value
                and self.important == __value.important
            )
        return False

    def __repr__(self) -> str:
        return f"Decl({'!, ' if self.important else ''}{self.name!r}, {self.value!r})"

    def __str__(self) -> str:
        return f"{self.name}: {self.value}{' !important' if self.important else ''};"

class QualifiedRule:
    prelude: str
    block: list[Component]
    def __init__(self, prelude: str, block: list[Component] | None = None) -> None:
        self.prelude = prelude
        self.block = block or []

    def selector(self, parent: str | None = None) -> str:
        if parent is None:
            return self.prelude
        elif "&" in self.prelude:
            return self.prelude.replace("&", parent)
        return f"{parent} {self.prelude}"

    def serialize(self, indent: str = "  ", depth: int = 0, parent: str | None = None) -> list[str]:
        selector = self.selector(parent)
        lines = _block(selector, declarations(self.block), indent, depth)
        for child in self.block:
            if isinstance(child, (QualifiedRule, AtRule)):
                lines.extend(child.serialize(indent, depth, selector))
        return lines

    def __repr__(self) -> str:
        return f"QualifiedRule({self.prelude!r}, block={{...}})"

class AtRule:
    name: str
    prelude: str
    block: Optional[list[Component]]
    def __init__(self, name: str, prelude: str = "", block: list[Component] | None = None) -> None:
        self.name = name
        self.prelude = prelude
        self.block = block

    def serialize(self, indent: str = "  ", depth: int = 0, parent: str | None = None) -> list[str]:
        pad = indent * depth
        head = f"{pad}@{self.name} {self.prelude}".rstrip()
        if self.block is None:
            return [f"{head};"]

        lines = [f"{head} {{"]
        if parent is not None:
            lines.extend(_block(parent, declarations(self.block), indent, depth + 1))
        else:
            lines.extend(f"{pad}{indent}{decl}" for decl in declarations(self.block))
        for child in self.block:
            if isinstance(child, (QualifiedRule, AtRule)):
                lines.extend(child.serialize(indent, depth + 1, parent))
        lines.append(f"{pad}}}")
        return lines

    def __repr__(self) -> str:
        block = "None"
        if self.block is not None:
            block = "{...}"
        return f"AtRule({self.name!r}, prelude={self.prelude!r}, block={block})"

Component = Declaration | QualifiedRule | AtRule

def declarations(block: list[Component]) -> list[Declaration]:
    return [component for component in block if isinstance(component, Declaration)]

def _block(selector: str, decls: list[Declaration], indent: str, depth: int) -> list[str]:
    if len(decls) == 0:
        return []
    pad = indent * depth
    return [
        f"{pad}{selector} {{",
        *(f"{pad}{indent}{decl}" for decl in decls),
        f"{pad}}}",
    ]

class Stylesheet:
    def __init__(self, rules: list[QualifiedRule | AtRule] | None = None, *, indent: str = "  ") -> None:
        self.indent = indent
        self._css_rules_: list[QualifiedRule | AtRule] = list(rules or [])

    @property
    def css_rules(self) -> list[QualifiedRule | AtRule]:
        return self._css_rules_

    def insert_rule(self, rule: QualifiedRule | AtRule, index: int | None = None) -> int:
        """Insert a rule, appending when no index is given. Returns the rule's index."""
        if index is None:
            index = len(self._css_rules_)
        self._css_rules_.insert(index, rule)
        return index

    def delete_rule(self, index: int):
        self._css_rules_.pop(index)

    def rule(self, selector: str, *blocks: list[Component]) -> QualifiedRule:
        """Add a rule for `selector` holding the components of every block, in order."""
        rule = QualifiedRule(selector, [component for block in blocks for component in block])
        self.insert_rule(rule)
        return rule

    def serialize(self) -> str:
        lines: list[str] = []
        for rule in self._css_rules_:
            lines.extend(rule.serialize(self.indent))
        return "\n".join(lines) + "\n" if lines else ""

    def __repr__(self) -> str:
        sep = "\n  "
        return f"""Stylesheet(
  {sep.join(repr(rule) for rule in self.css_rules)}
)"""

    def __str__(self) -> str:
        return self.serialize()
