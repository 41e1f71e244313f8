"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from remark.domain.model import Report
from remark.domain.value import ReportId, ReportStatus, UserId


class ReportRepository(ABC):
    """Repository for Report entity."""

    @abstractmethod
    async def insert(self, report: Report) -> Report:
        """Insert a report.

        Raises:
            AlreadyExistsError: If the reporter already reported the comment
        """
        pass

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        pass

    @abstractmethod
    async def find_pending(self, offset: int, limit: int) -> tuple[list[Report], int]:
        """Pending reports, oldest first.

        Returns:
            Tuple of (reports, total count)
        """
        pass

    @abstractmethod
    async def update_status(
        self, report_id: ReportId, status: ReportStatus, reviewed_by: UserId
    ) -> Optional[Report]:
        """Mark a report reviewed or dismissed.

        Returns:
            The updated report, None if it does not exist
        """
        pass
