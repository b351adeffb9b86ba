from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeProfile


class EmployeeRepository(Protocol):
    def list_active_profiles(
        self,
        *,
        country_code: str,
        employee_ids: Optional[Sequence[int]] = None,
    ) -> Sequence[EmployeeProfile]:
        """Active employees of one country, optionally narrowed to employee_ids."""

        raise NotImplementedError
