"""
Podium snapshot pipeline orchestration.

For each requested season, fetches race sessions and meetings from OpenF1,
resolves every race's podium, and writes all races (newest first) to a
single JSON snapshot.
"""
import json
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional

from tqdm import tqdm

from src.config import cfg
from src.ingest_openf1.api_client import OpenF1Client
from src.ingest_openf1.fetchers import fetch_meetings, fetch_sessions
from src.ingest_openf1.models import MeetingInfo, MeetingMap, RaceResult, race_id
from src.ingest_openf1.podium import build_podium, get_drivers, get_final_positions
from src.utils.logger import logger
from src.utils.time_utils import date_part, to_iso, utc_now


def build_meeting_map(meetings: Iterable[dict]) -> MeetingMap:
    """Index meeting records by meeting key."""
    return {
        m["meeting_key"]: MeetingInfo(
            name=m.get("meeting_name"),
            location=m.get("location"),
            country=m.get("country_name"),
            country_code=m.get("country_code"),
            flag=m.get("country_flag"),
            circuit_image=m.get("circuit_image"),
        )
        for m in meetings
    }


def _race_base(session: dict, meeting: MeetingInfo, year: int, round_number: int) -> dict:
    """Fields shared by successful and failed race records."""
    return {
        "id": race_id(year, round_number),
        "season": year,
        "round": round_number,
        "session_key": session.get("session_key"),
        "meeting_key": session.get("meeting_key"),
        "name": meeting.name or f"Round {round_number}",
        "date": date_part(session.get("date_start") or ""),
        "location": meeting.location or session.get("location"),
        "country": meeting.country or "",
        "country_code": meeting.country_code or "",
        "flag": meeting.flag,
        "circuit_image": meeting.circuit_image,
    }


def process_race(client: OpenF1Client, session: dict, base: dict) -> RaceResult:
    """
    Resolve one race's podium.

    Final positions and driver metadata are fetched concurrently. Errors
    propagate; ``process_year`` turns them into degraded records.
    """
    session_key = session["session_key"]
    with ThreadPoolExecutor(max_workers=2) as executor:
        positions_future = executor.submit(get_final_positions, client, session_key)
        drivers_future = executor.submit(get_drivers, client, session_key)
        final_positions, podium_numbers = positions_future.result()
        drivers = drivers_future.result()

    podium = build_podium(podium_numbers, final_positions, drivers)
    return RaceResult(**base, podium=podium)


def process_year(
    client: OpenF1Client,
    year: int,
    race_pause: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[RaceResult]:
    """
    Build result records for every grand prix of a season.

    A failure while resolving a single race is logged and recorded on that
    race's result (empty podium, ``error`` set); the season carries on.
    Failures fetching the session or meeting lists propagate.

    Args:
        client: OpenF1Client instance.
        year: F1 season year.
        race_pause: Seconds to wait between races (default from config).
        sleep: Sleep function, injectable for tests.

    Returns:
        Race results in round order.
    """
    race_pause = cfg.api.race_pause if race_pause is None else race_pause
    logger.info(f"📅 Fetching {year} season...")

    # session_type=Race includes sprints; grands prix are named exactly "Race"
    races = [s for s in fetch_sessions(client, year) if s.get("session_name") == "Race"]
    logger.info(f"Found {len(races)} races")

    meeting_map = build_meeting_map(fetch_meetings(client, year))

    results: list[RaceResult] = []
    for index, session in enumerate(tqdm(races, desc=f"{year}", unit="race")):
        round_number = index + 1
        meeting = meeting_map.get(session.get("meeting_key"), MeetingInfo())
        label = meeting.name or session.get("circuit_short_name")
        base = _race_base(session, meeting, year, round_number)

        try:
            result = process_race(client, session, base)
            leader = result.podium[0].driver if result.podium else "?"
            logger.info(f"[{round_number}/{len(races)}] {label} ✓ (P1: {leader})")
        except Exception as e:
            logger.error(f"[{round_number}/{len(races)}] {label} ✗ Error: {e}")
            result = RaceResult(**base, podium=[], error=str(e))
        results.append(result)

        if index < len(races) - 1:
            sleep(race_pause)

    return results


def sort_races(races: Iterable[RaceResult]) -> list[RaceResult]:
    """Newest first. ISO dates compare correctly as strings."""
    return sorted(races, key=lambda r: r.date, reverse=True)


def write_snapshot(
    races: list[RaceResult],
    output_path: Path,
    fetched_at: Optional[datetime] = None,
) -> Path:
    """
    Write the snapshot JSON, replacing any previous file.

    Args:
        races: Race results in output order.
        output_path: Destination file; parent directories are created.
        fetched_at: Run timestamp (default: now, UTC).

    Returns:
        The path written.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    document = {
        "races": [r.to_json_dict() for r in races],
        "fetchedAt": to_iso(fetched_at or utc_now()),
    }
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
    logger.debug(f"Saved {len(races)} races → {output_path}")
    return output_path


def run_fetch_pipeline(
    years: list[int],
    output_path: Path | None = None,
    client: OpenF1Client | None = None,
    race_pause: float | None = None,
) -> list[RaceResult]:
    """
    Main pipeline entry point.

    1. Processes each season in turn
    2. Sorts all races by date, newest first
    3. Writes the snapshot to ``output_path`` (default ``cfg.paths.output``)

    Returns:
        The sorted race results that were written.
    """
    output_path = Path(output_path or cfg.paths.output)
    client = client or OpenF1Client()

    logger.info(f"🏎️  OpenF1 race fetcher — years: {', '.join(map(str, years))}")

    all_races: list[RaceResult] = []
    for year in years:
        all_races.extend(process_year(client, year, race_pause=race_pause))

    all_races = sort_races(all_races)
    write_snapshot(all_races, output_path)

    failed = sum(1 for r in all_races if r.error)
    logger.info(f"✅ Done! {len(all_races)} races written to {output_path} ({failed} with errors)")
    return all_races
