"""Rule transforms: the identity transform other variants build on."""

from __future__ import annotations

from themestyles.stylesheet.model import PropertyValue, Rule, Stylesheet


def copy_properties(properties: dict[str, PropertyValue]) -> dict[str, PropertyValue]:
    """Copy a property mapping so multi-value lists are not shared."""
    return {
        name: list(value) if isinstance(value, list) else value
        for name, value in properties.items()
    }


class RuleTransform:
    """Rewrite a stylesheet one rule at a time.

    Selectors and properties are rewritten independently by
    :meth:`transform_selectors` and :meth:`transform_properties`; variants
    override either half, or :meth:`transform_rule` when one depends on the
    other.  The base class copies rules unchanged.
    """

    def transform(self, stylesheet: Stylesheet) -> Stylesheet:
        rules = [self.transform_rule(rule) for rule in stylesheet]
        return Stylesheet(rules=rules)

    def transform_rule(self, rule: Rule) -> Rule:
        return Rule(
            selectors=self.transform_selectors(rule.selectors),
            properties=self.transform_properties(rule.properties),
        )

    def transform_selectors(self, selectors: list[str]) -> list[str]:
        return list(selectors)

    def transform_properties(
        self, properties: dict[str, PropertyValue]
    ) -> dict[str, PropertyValue]:
        return copy_properties(properties)


IdentityTransform = RuleTransform
