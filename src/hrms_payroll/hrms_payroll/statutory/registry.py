from __future__ import annotations

from typing import Iterable, Optional

from ..core.exceptions import UnsupportedCountry
from .base import StatutoryRuleEvaluator
from .india import IndiaRuleEvaluator
from .rules import IndiaRuleSet, UAERuleSet
from .uae import UAERuleEvaluator


class StatutoryRegistry:
    """Factory Pattern: country code -> rule evaluator.

    New countries are added by registering another evaluator; the calculator
    never branches on country codes itself.
    """

    def __init__(self, evaluators: Iterable[StatutoryRuleEvaluator] = ()):
        self._evaluators: dict[str, StatutoryRuleEvaluator] = {}
        for evaluator in evaluators:
            self.register(evaluator)

    def register(self, evaluator: StatutoryRuleEvaluator) -> None:
        self._evaluators[evaluator.country_code.upper()] = evaluator

    def get(self, country_code: Optional[str]) -> StatutoryRuleEvaluator:
        evaluator = self._evaluators.get((country_code or "").strip().upper())
        if evaluator is None:
            raise UnsupportedCountry(country_code)
        return evaluator

    def is_supported(self, country_code: Optional[str]) -> bool:
        return (country_code or "").strip().upper() in self._evaluators

    def supported_countries(self) -> list[dict]:
        return [
            {
                "code": e.country_code,
                "name": e.country_name,
                "currency": e.currency_code,
                "capabilities": e.capabilities(),
            }
            for e in self._evaluators.values()
        ]


def build_default_registry(
    *,
    india_rules: Optional[IndiaRuleSet] = None,
    uae_rules: Optional[UAERuleSet] = None,
) -> StatutoryRegistry:
    return StatutoryRegistry([IndiaRuleEvaluator(india_rules), UAERuleEvaluator(uae_rules)])
