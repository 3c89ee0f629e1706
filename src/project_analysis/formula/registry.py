"""Ordered set of the formulas of an analysis.

Formulas are registered at pipeline startup. Once frozen, the registry can
no longer change, so every component of an analysis sees the same formulas.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from ..exceptions import InvalidConfigurationError
from .protocols import Formula


class FormulaRegistry:
    def __init__(self, formulas: Iterable[Formula] = ()) -> None:
        self._formulas: list[Formula] = []
        self._owners: dict[str, Formula] = {}
        self._frozen = False
        for formula in formulas:
            self.register(formula)

    def register(self, formula: Formula) -> None:
        if self._frozen:
            raise InvalidConfigurationError("formulas", formula, "registry is frozen")
        keys = formula.output_metric_keys()
        if not keys:
            raise InvalidConfigurationError("formulas", formula, "formula declares no output metric")
        for key in keys:
            owner = self._owners.get(key)
            if owner is not None:
                raise InvalidConfigurationError(
                    "formulas", key, f"output metric already produced by {owner!r}"
                )
        for key in keys:
            self._owners[key] = formula
        self._formulas.append(formula)

    def freeze(self) -> FormulaRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def output_metric_keys(self) -> tuple[str, ...]:
        return tuple(self._owners)

    def __iter__(self) -> Iterator[Formula]:
        return iter(tuple(self._formulas))

    def __len__(self) -> int:
        return len(self._formulas)
