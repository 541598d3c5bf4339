"""Stylesheet model: Rule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, Union

# A property holds one value, or every value of a repeated declaration in order.
PropertyValue = Union[str, list[str]]


@dataclass(frozen=True)
class Rule:
    """A selector list paired with its property declarations.

    Property insertion order is the print order.  A property declared more
    than once holds a list of its values in declaration order.
    """

    selectors: list[str] = field(default_factory=list)
    properties: dict[str, PropertyValue] = field(default_factory=dict)

    @property
    def selector_text(self) -> str:
        """Return the selectors joined the way they are printed."""
        return ", ".join(self.selectors)

    def values(self, name: str) -> list[str]:
        """Return every value of property *name* (empty when absent)."""
        value = self.properties.get(name)
        if value is None:
            return []
        if isinstance(value, list):
            return list(value)
        return [value]

    def is_empty(self) -> bool:
        return not self.selectors or not self.properties


@dataclass(frozen=True)
class Stylesheet:
    """An ordered collection of rules parsed from one stylesheet."""

    rules: list[Rule] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __getitem__(self, index: int) -> Rule:
        return self.rules[index]

    def find_by_selector(
        self, criteria: str, exact: bool = True, match_all: bool = False
    ) -> Rule | list[Rule] | None:
        """Look up rules by their joined selector text.

        With *exact* the joined selectors must equal *criteria*; otherwise
        *criteria* only has to occur in them.  Returns the first match, every
        match when *match_all* is set, or ``None`` when nothing matches.
        """
        if exact:
            matches = [r for r in self.rules if r.selector_text == criteria]
        else:
            matches = [r for r in self.rules if criteria in r.selector_text]
        if not matches:
            return None
        return matches if match_all else matches[0]

    def index_of(self, rule: Rule) -> int:
        """Return the position of *rule* (by identity) in this stylesheet."""
        for i, candidate in enumerate(self.rules):
            if candidate is rule:
                return i
        raise ValueError("rule is not part of this stylesheet")

    def replace_rule(self, index: int, rule: Rule) -> Stylesheet:
        """Return a copy of this stylesheet with the rule at *index* swapped."""
        rules = list(self.rules)
        rules[index] = rule
        return replace(self, rules=rules)
