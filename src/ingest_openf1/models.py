"""
Typed records for the podium snapshot.

Lookup maps:
  - DriverMap:      driver number → DriverInfo (scoped to one session)
  - MeetingMap:     meeting key   → MeetingInfo
  - FinalPositions: driver number → final classified position
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DriverInfo(BaseModel):
    """Display metadata for one driver in one session."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    team: Optional[str] = None
    colour: Optional[str] = None
    acronym: Optional[str] = None
    headshot: Optional[str] = None


class MeetingInfo(BaseModel):
    """Race weekend metadata."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    flag: Optional[str] = None
    circuit_image: Optional[str] = None


DriverMap = dict[int, DriverInfo]
MeetingMap = dict[int, MeetingInfo]
FinalPositions = dict[int, int]


class PodiumEntry(BaseModel):
    position: int
    driver: str
    team: str
    colour: str
    acronym: str
    headshot: Optional[str] = None


class RaceResult(BaseModel):
    """One race in the output snapshot. Serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    season: int
    round: int
    session_key: Optional[int] = None
    meeting_key: Optional[int] = None
    name: str
    date: str
    location: Optional[str] = None
    country: str = ""
    country_code: str = ""
    flag: Optional[str] = None
    circuit_image: Optional[str] = None
    podium: list[PodiumEntry] = []
    # Editorial text, attached later by the presentation layer
    story: Optional[str] = None
    error: Optional[str] = None

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize for the snapshot file; ``error`` only appears when set."""
        exclude = {"error"} if self.error is None else set()
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)


def race_id(season: int, round_number: int) -> str:
    """Deterministic id, e.g. season 2023 round 3 → '2023-03'."""
    return f"{season}-{round_number:02d}"
