"""Travel action domain model."""

from dataclasses import dataclass

TIMETABLE_ENTRYPOINT = "timetable"


@dataclass(frozen=True)
class TravelAction:
    """Backend handle binding an origin/destination/datetime triple."""

    id: str
    entrypoint_kind: str | None

    @property
    def is_timetable(self) -> bool:
        """Whether this action can be used for a timetable search."""
        return self.entrypoint_kind == TIMETABLE_ENTRYPOINT
