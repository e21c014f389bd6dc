"""
Podium resolution from OpenF1 position and driver records.

The position endpoint returns a timestamped history per driver. The final
classification is taken as the last record seen for each driver, which
relies on the API returning records in chronological order.
"""
import re
from typing import Iterable

from src.ingest_openf1.api_client import OpenF1Client
from src.ingest_openf1.fetchers import fetch_drivers, fetch_position
from src.ingest_openf1.models import DriverInfo, DriverMap, FinalPositions, PodiumEntry
from src.utils.logger import logger
from src.utils.time_utils import parse_openf1_timestamp

PODIUM_SIZE = 3

_FAMILY_NAME = re.compile(r"([A-Z]+)$")

# Placeholders for podium drivers missing from the drivers endpoint
UNKNOWN_TEAM = "Unknown"
UNKNOWN_COLOUR = "888888"


def _is_chronological(records: list[dict]) -> bool:
    stamps = [parse_openf1_timestamp(r.get("date")) for r in records]
    stamps = [s for s in stamps if s is not None]
    return all(a <= b for a, b in zip(stamps, stamps[1:]))


def resolve_final_positions(records: Iterable[dict]) -> FinalPositions:
    """
    Reduce a position history to one final position per driver.

    Later records overwrite earlier ones, so each driver ends up with the
    position of its last record in input order.
    """
    records = list(records)
    if not _is_chronological(records):
        logger.warning(
            "Position records are not in chronological order; "
            "final standings use the last record per driver regardless"
        )

    final_positions: FinalPositions = {}
    for entry in records:
        final_positions[int(entry["driver_number"])] = int(entry["position"])
    return final_positions


def select_podium(final_positions: FinalPositions) -> list[int]:
    """Driver numbers classified in the top three, best position first."""
    top = [(num, pos) for num, pos in final_positions.items() if pos <= PODIUM_SIZE]
    top.sort(key=lambda item: item[1])
    return [num for num, _ in top][:PODIUM_SIZE]


def get_final_positions(
    client: OpenF1Client,
    session_key: int,
) -> tuple[FinalPositions, list[int]]:
    """Fetch a session's positions and return (final positions, podium numbers)."""
    final_positions = resolve_final_positions(fetch_position(client, session_key))
    return final_positions, select_podium(final_positions)


def normalize_driver_name(full_name: str) -> str:
    """
    Title-case the trailing uppercase family name.

    'Max VERSTAPPEN' → 'Max Verstappen'. Names without a trailing
    uppercase run are returned unchanged.
    """
    return _FAMILY_NAME.sub(lambda m: m.group(1)[0] + m.group(1)[1:].lower(), full_name)


def build_driver_map(records: Iterable[dict]) -> DriverMap:
    drivers: DriverMap = {}
    for d in records:
        full_name = d.get("full_name")
        drivers[int(d["driver_number"])] = DriverInfo(
            name=normalize_driver_name(full_name) if full_name else None,
            team=d.get("team_name"),
            colour=d.get("team_colour"),
            acronym=d.get("name_acronym"),
            headshot=d.get("headshot_url"),
        )
    return drivers


def get_drivers(client: OpenF1Client, session_key: int) -> DriverMap:
    """Fetch and index driver metadata for a session."""
    return build_driver_map(fetch_drivers(client, session_key))


def build_podium(
    podium_numbers: list[int],
    final_positions: FinalPositions,
    drivers: DriverMap,
) -> list[PodiumEntry]:
    """Join podium driver numbers with metadata, substituting placeholders."""
    podium = []
    for num in podium_numbers[:PODIUM_SIZE]:
        info = drivers.get(num, DriverInfo())
        podium.append(
            PodiumEntry(
                position=final_positions[num],
                driver=info.name or f"#{num}",
                team=info.team or UNKNOWN_TEAM,
                colour=info.colour or UNKNOWN_COLOUR,
                acronym=info.acronym or str(num),
                headshot=info.headshot or None,
            )
        )
    return podium
