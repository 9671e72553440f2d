"""Dashboard statistics over the photo collections."""

from collections import Counter
from dataclasses import dataclass
from datetime import UTC, date

from photobooth_admin.domain.photos import PhotoKind
from photobooth_admin.services.photos import PhotoRepository
from photobooth_admin.services.sessions import SessionService


@dataclass(frozen=True)
class PhotoOverview:
    """Record counts for the admin dashboard."""

    counts: dict[PhotoKind, int]
    total_sessions: int

    @property
    def total_photos(self) -> int:
        return sum(self.counts.values())


@dataclass(frozen=True)
class DailyCount:
    """Number of records created on one UTC calendar day."""

    day: date
    count: int


@dataclass
class StatsService:
    """Service for admin dashboard counters."""

    repository: PhotoRepository
    session_service: SessionService

    def get_overview(self) -> PhotoOverview:
        """Return per-kind counts and the distinct session count."""
        counts = {kind: self.repository.count_records(kind) for kind in PhotoKind}
        return PhotoOverview(
            counts=counts,
            total_sessions=self.session_service.count_sessions(),
        )

    def photos_by_date(self) -> dict[PhotoKind, list[DailyCount]]:
        """Return per-kind record counts grouped by UTC creation day, oldest first."""
        grouped: dict[PhotoKind, list[DailyCount]] = {}
        for kind in PhotoKind:
            days = Counter(
                stamp.created_at.astimezone(UTC).date()
                for stamp in self.repository.list_session_stamps(kind)
            )
            grouped[kind] = [
                DailyCount(day=day, count=count) for day, count in sorted(days.items())
            ]
        return grouped
