"""Metric rule registry.

Each MetricRule detects one adaptation reason. The registry imports every
module under ``workout_engine.rules`` and keeps one instance per rule_id;
MetricsAnalyzer then evaluates them in AdaptationReason order so the
reasons it reports come out in a stable order.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil

from workout_engine.models.enums import AdaptationReason
from workout_engine.rules.base import MetricRule

logger = logging.getLogger(__name__)

_REASON_ORDER = {reason: index for index, reason in enumerate(AdaptationReason)}


class RuleRegistry:
    """Metric rules keyed by rule_id.

    ``discover_rules`` picks up every concrete MetricRule subclass found in
    the rules package, so a new threshold check only needs a module under
    rules/recovery or rules/wellbeing. Tests can build an empty registry
    and ``register`` just the rules they exercise.
    """

    def __init__(self) -> None:
        self._rules: dict[str, MetricRule] = {}

    def discover_rules(self) -> None:
        import workout_engine.rules as rules_pkg

        self._scan_package(rules_pkg.__name__, list(rules_pkg.__path__))

    def _scan_package(self, package_name: str, package_path: list[str]) -> None:
        for _, module_name, _ in pkgutil.walk_packages(
            package_path, prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, MetricRule)
                    and attr is not MetricRule
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr())

    def register(self, rule: MetricRule) -> None:
        """Add a rule; a rule with the same rule_id is replaced."""
        if rule.rule_id not in self._rules:
            logger.debug("Registered rule %s v%s", rule.rule_id, rule.version)
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> MetricRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[MetricRule]:
        """Rules ordered by the reason they detect, then by rule_id."""
        return sorted(self._rules.values(), key=lambda r: (_REASON_ORDER[r.reason], r.rule_id))

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules.keys())
