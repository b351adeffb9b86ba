from __future__ import annotations

from typing import Protocol, Sequence

from .model import CompensationLineItem


class CompensationRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[CompensationLineItem]:
        """Every line item of the employee; date filtering is the calculator's job."""

        raise NotImplementedError
