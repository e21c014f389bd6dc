"""
Endpoint-specific fetchers for the OpenF1 API.

Each fetcher returns the list of raw record dicts for one query.
"""
from src.ingest_openf1.api_client import OpenF1Client
from src.utils.logger import logger


def fetch_sessions(
    client: OpenF1Client,
    year: int,
    session_type: str = "Race",
) -> list[dict]:
    """
    Fetch all sessions of a type for a given year.

    Note that ``session_type=Race`` also matches sprint races; callers
    filter on ``session_name`` to keep grands prix only.

    Args:
        client: OpenF1Client instance.
        year: F1 season year (e.g. 2024).
        session_type: Session type to filter (default 'Race').

    Returns:
        List of session metadata dicts.
    """
    logger.debug(f"Fetching sessions for {year} ({session_type})...")
    return client.get("/sessions", params={"session_type": session_type, "year": year})


def fetch_meetings(client: OpenF1Client, year: int) -> list[dict]:
    """Fetch meeting (race weekend) metadata for a given year."""
    logger.debug(f"Fetching meetings for {year}...")
    return client.get("/meetings", params={"year": year})


def fetch_position(
    client: OpenF1Client,
    session_key: int,
) -> list[dict]:
    """
    Fetch driver position data for a session.

    Args:
        client: OpenF1Client instance.
        session_key: Unique session identifier.

    Returns:
        List of position records (driver × timestamp).
    """
    logger.debug(f"Fetching position for session {session_key}...")
    return client.get("/position", params={"session_key": session_key})


def fetch_drivers(
    client: OpenF1Client,
    session_key: int,
) -> list[dict]:
    """
    Fetch driver metadata for a session.

    Args:
        client: OpenF1Client instance.
        session_key: Unique session identifier.

    Returns:
        List of driver metadata dicts.
    """
    logger.debug(f"Fetching drivers for session {session_key}...")
    return client.get("/drivers", params={"session_key": session_key})
