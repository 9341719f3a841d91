"""L-system rewriting.

``expand`` performs the parallel rewriting passes. ``ExpandedSequence`` keeps
the rewritten text alongside its decoded turtle commands so the interpreter
never dispatches on raw characters.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from functools import cached_property
from types import MappingProxyType

from bloom.utilities.logging import get_logger

logger = get_logger(__name__)


class TurtleCommand(StrEnum):
    FORWARD = "F"
    TURN_RIGHT = "+"
    TURN_LEFT = "-"
    PUSH = "["
    POP = "]"
    NOOP = ""

    @classmethod
    def from_symbol(cls, symbol: str) -> "TurtleCommand":
        if not symbol:
            return cls.NOOP
        try:
            return cls(symbol)
        except ValueError:
            return cls.NOOP


def bracket_depth(commands: Iterable[TurtleCommand]) -> int:
    """Deepest bracket nesting, ignoring unmatched closing brackets."""
    depth = 0
    deepest = 0
    for command in commands:
        if command is TurtleCommand.PUSH:
            depth += 1
            deepest = max(deepest, depth)
        elif command is TurtleCommand.POP and depth > 0:
            depth -= 1
    return deepest


def expand(axiom: str, rules: Mapping[str, str], iterations: int) -> str:
    """Rewrite ``axiom`` ``iterations`` times.

    Symbols without a rule rewrite to themselves. Output of a pass is not
    re-expanded within the same pass.
    """
    current = axiom
    for _ in range(max(iterations, 0)):
        current = "".join(rules.get(symbol, symbol) for symbol in current)
    return current


@dataclass(frozen=True)
class Grammar:
    axiom: str
    rules: Mapping[str, str]
    angle_step_deg: float
    iterations: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def with_iterations(self, iterations: int) -> "Grammar":
        return Grammar(
            axiom=self.axiom,
            rules=self.rules,
            angle_step_deg=self.angle_step_deg,
            iterations=iterations,
        )


@dataclass(frozen=True)
class ExpandedSequence:
    text: str
    commands: tuple[TurtleCommand, ...] = field(repr=False)

    @classmethod
    def from_text(cls, text: str) -> "ExpandedSequence":
        return cls(
            text=text,
            commands=tuple(TurtleCommand.from_symbol(symbol) for symbol in text),
        )

    @classmethod
    def from_grammar(
        cls, grammar: Grammar, *, max_iterations: int | None = None
    ) -> "ExpandedSequence":
        iterations = max(grammar.iterations, 0)
        if max_iterations is not None and iterations > max_iterations:
            logger.warning(
                "Clamping L-system iterations from %s to %s",
                iterations,
                max_iterations,
            )
            iterations = max_iterations
        sequence = cls.from_text(expand(grammar.axiom, grammar.rules, iterations))
        logger.info(
            "Expanded L-system to %s symbols over %s iterations",
            len(sequence),
            iterations,
        )
        return sequence

    def __len__(self) -> int:
        return len(self.commands)

    def count(self, command: TurtleCommand) -> int:
        return sum(1 for current in self.commands if current is command)

    def max_depth(self) -> int:
        return self._max_depth

    @cached_property
    def _max_depth(self) -> int:
        return bracket_depth(self.commands)
