from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import ComponentStatus, ComponentType


@dataclass(frozen=True)
class CompensationLineItem:
    """Domain entity: one compensation component assigned to an employee.

    Exactly one of ``amount``/``percentage`` is meaningful, selected by
    ``is_percentage``. Percentage items name the component they are computed
    against through ``basis_component_code``.
    """

    component_code: str
    component_type: ComponentType
    is_percentage: bool = False
    amount: Decimal = Decimal("0")
    percentage: Decimal = Decimal("0")
    basis_component_code: Optional[str] = None
    effective_date: Optional[date] = None
    end_date: Optional[date] = None
    status: ComponentStatus = ComponentStatus.ACTIVE
    component_name: Optional[str] = None

    def is_active_on(self, as_of: date) -> bool:
        if self.status != ComponentStatus.ACTIVE:
            return False
        if self.effective_date and as_of < self.effective_date:
            return False
        if self.end_date and as_of > self.end_date:
            return False
        return True

    @property
    def is_earning(self) -> bool:
        return self.component_type in (ComponentType.EARNING, ComponentType.ALLOWANCE)


@dataclass(frozen=True)
class ResolvedComponent:
    """Read-model: a line item with its amount for the calculation date."""

    component_code: str
    component_type: ComponentType
    amount: Decimal
    is_percentage: bool = False
    basis_component_code: Optional[str] = None
