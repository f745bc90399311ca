"""
CompanyData Repository Interface.
"""

from typing import Any, Optional, Protocol

from synergia.domain.schemas.company_data import CompanyDataRead


class CompanyDataRepository(Protocol):
    """The letterhead is a singleton, so there is no add/get_all."""

    def get_company_data(self) -> Optional[CompanyDataRead]:
        ...

    def update_company_data(self, data: Any) -> CompanyDataRead:
        """Create or overwrite the singleton."""
        ...

    def clear(self) -> None:
        ...
