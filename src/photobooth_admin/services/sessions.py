"""Session aggregation across the photo collections."""

from dataclasses import dataclass

from photobooth_admin.domain.photos import PhotoKind, SessionStamp, SessionSummary
from photobooth_admin.services.photos import PhotoRepository


@dataclass
class SessionService:
    """Derives the distinct photo sessions from the record store.

    Sessions are not stored on their own; they exist only as the
    ``session_id`` tag shared by photo rows. Empty and null ids never count.
    Every method is read-only and lets repository errors propagate.
    """

    repository: PhotoRepository

    def list_sessions(self) -> list[SessionSummary]:
        """Return distinct sessions ordered by latest photo, newest first."""
        latest: dict[str, SessionStamp] = {}
        counts: dict[str, int] = {}
        for stamp in self._stamps():
            session_id = stamp.session_id
            counts[session_id] = counts.get(session_id, 0) + 1
            current = latest.get(session_id)
            if current is None or stamp.created_at > current.created_at:
                latest[session_id] = stamp
        summaries = [
            SessionSummary(
                session_id=session_id,
                created_at=stamp.created_at,
                photo_count=counts[session_id],
            )
            for session_id, stamp in latest.items()
        ]
        return sorted(summaries, key=lambda summary: summary.created_at, reverse=True)

    def session_ids(self) -> set[str]:
        """Return the set of distinct session ids."""
        return {stamp.session_id for stamp in self._stamps()}

    def count_sessions(self) -> int:
        """Return the number of distinct session ids."""
        return len(self.session_ids())

    def _stamps(self) -> list[SessionStamp]:
        stamps: list[SessionStamp] = []
        for kind in PhotoKind:
            stamps.extend(
                stamp
                for stamp in self.repository.list_session_stamps(kind)
                if _has_session(stamp)
            )
        return stamps


def _has_session(stamp: SessionStamp) -> bool:
    return stamp.session_id is not None and stamp.session_id.strip() != ""
