# src/leerstand/services/calculators.py
from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Callable, Generic, TypeVar

from leerstand.domain.roi import FunnelStage, ROIInput, ROIResult, derive_roi, funnel_series
from leerstand.domain.vacancy import (
    BreakdownItem,
    VacancyInput,
    VacancyResult,
    derive_vacancy,
    vacancy_breakdown,
)

InputT = TypeVar("InputT")
ResultT = TypeVar("ResultT")


class UnknownFieldError(KeyError):
    pass


class _Calculator(Generic[InputT, ResultT]):
    """
    Holds one input model and its derived result.

    Every update re-runs the derivation over the full input; there is no
    partial recompute and no cache.
    """

    def __init__(self, factory: Callable[[], InputT], derive: Callable[[InputT], ResultT],
                 inputs: InputT | None = None) -> None:
        self._factory = factory
        self._derive = derive
        self.inputs: InputT = inputs if inputs is not None else factory()
        self.result: ResultT = derive(self.inputs)

    def update(self, **changes: Any) -> ResultT:
        known = {f.name for f in fields(self.inputs)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise UnknownFieldError(f"Unknown input field(s): {', '.join(unknown)}")
        self.inputs = replace(self.inputs, **{k: float(v) for k, v in changes.items()})
        self.result = self._derive(self.inputs)
        return self.result

    def reset(self) -> ResultT:
        self.inputs = self._factory()
        self.result = self._derive(self.inputs)
        return self.result


class VacancyCalculator(_Calculator[VacancyInput, VacancyResult]):
    def __init__(self, inputs: VacancyInput | None = None) -> None:
        super().__init__(VacancyInput, derive_vacancy, inputs)

    @property
    def breakdown(self) -> list[BreakdownItem]:
        return vacancy_breakdown(self.result)


class ROICalculator(_Calculator[ROIInput, ROIResult]):
    def __init__(self, inputs: ROIInput | None = None) -> None:
        super().__init__(ROIInput, derive_roi, inputs)

    @property
    def funnel(self) -> list[FunnelStage]:
        return funnel_series(self.result)
