import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from rapidfuzz import process, fuzz, utils

logger = logging.getLogger("events")

TOTAL_SELECTION = re.compile(r"(?i)^(over|under)\s*\d")

NFL_TEAM_NAMES: Dict[str, str] = {
    "ARI": "Cardinals",
    "ATL": "Falcons",
    "BAL": "Ravens",
    "BUF": "Bills",
    "CAR": "Panthers",
    "CHI": "Bears",
    "CIN": "Bengals",
    "CLE": "Browns",
    "DAL": "Cowboys",
    "DEN": "Broncos",
    "DET": "Lions",
    "GB": "Packers",
    "HOU": "Texans",
    "IND": "Colts",
    "JAC": "Jaguars",
    "KC": "Chiefs",
    "LV": "Raiders",
    "LAC": "Chargers",
    "LAR": "Rams",
    "MIA": "Dolphins",
    "MIN": "Vikings",
    "NE": "Patriots",
    "NO": "Saints",
    "NYG": "Giants",
    "NYJ": "Jets",
    "PHI": "Eagles",
    "PIT": "Steelers",
    "SF": "49ers",
    "SEA": "Seahawks",
    "TB": "Buccaneers",
    "TEN": "Titans",
    "WAS": "Commanders",
}


@dataclass(frozen=True)
class EventMatch:
    event_id: Any
    event: Mapping[str, Any]
    role: str  # "home" or "away"
    score: float


def format_team_name(code: str) -> str:
    return NFL_TEAM_NAMES.get(code, code)


def _team(event: Mapping[str, Any], role: str) -> str:
    return str(event.get(f"{role}_team") or "")


def match_event(selection: str, events: Sequence[Mapping[str, Any]], threshold: float = 80.0) -> Optional[EventMatch]:
    """
    Find the scheduled event a leg selection refers to.

    Events are mappings with ``id``, ``home_team`` and ``away_team``. A team
    code equal to either side wins outright; otherwise the selection's display
    name is fuzzy-matched against both sides of every event.
    """
    if not selection or not events:
        return None
    if TOTAL_SELECTION.match(selection):
        return None

    wanted = selection.strip().upper()
    for ev in events:
        for role in ("home", "away"):
            if _team(ev, role).upper() == wanted:
                return EventMatch(ev.get("id"), ev, role, 100.0)

    candidates: List[str] = []
    keys: List[tuple] = []
    for idx, ev in enumerate(events):
        for role in ("home", "away"):
            name = _team(ev, role)
            if not name:
                continue
            candidates.append(format_team_name(name.upper()) if name.upper() in NFL_TEAM_NAMES else name)
            keys.append((idx, role))
    if not candidates:
        return None

    query = format_team_name(wanted) if wanted in NFL_TEAM_NAMES else selection.strip()
    match = process.extractOne(query, candidates, scorer=fuzz.token_set_ratio, processor=utils.default_process)
    if match and match[1] >= threshold:
        idx, role = keys[match[2]]
        ev = events[idx]
        logger.debug(f"Matched '{selection}' to event {ev.get('id')} ({role}, score {match[1]:.0f}).")
        return EventMatch(ev.get("id"), ev, role, float(match[1]))
    return None


def match_legs(legs: Sequence[Any], events: Sequence[Mapping[str, Any]], threshold: float = 80.0) -> List[Optional[EventMatch]]:
    # One entry per leg, in leg order; None where no event fits.
    return [match_event(leg.selection, events, threshold) for leg in legs]
