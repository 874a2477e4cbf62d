import logging
import re
from dataclasses import dataclass, field, replace, asdict
from enum import Enum
from typing import List, Optional, Tuple, Dict, Any

from format_router import normalize_ocr_text, split_lines, strip_noise_lines

logger = logging.getLogger("parsing")


class Market(str, Enum):
    MONEYLINE = "moneyline"
    SPREAD = "spread"
    TOTAL = "total"


class Side(str, Enum):
    HOME = "home"
    AWAY = "away"
    OVER = "over"
    UNDER = "under"
    # Moneyline: the selection names the participant directly.
    TEAM = "team"


@dataclass(frozen=True)
class ParsedLeg:
    market: Market
    side: Side
    selection: str
    line: Optional[float] = None
    odds_american: Optional[int] = None
    units_staked: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["market"] = self.market.value
        d["side"] = self.side.value
        return d


@dataclass(frozen=True)
class ParseResult:
    legs: Tuple[ParsedLeg, ...] = field(default_factory=tuple)
    stake: Optional[float] = None
    payout: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "legs": [leg.to_dict() for leg in self.legs],
            "stake": self.stake,
            "payout": self.payout,
        }


MONEY = re.compile(r"(?:\$|USD\s*)?([0-9]{1,3}(?:,[0-9]{3})*(?:\.[0-9]{2})?)", re.I)
AMERICAN_ODDS = re.compile(r"([+-]\s?\d{2,4})")
TOTAL_OVER = re.compile(r"\bOver\s*(\d{1,2}(?:\.5)?)\b", re.I)
TOTAL_UNDER = re.compile(r"\bUnder\s*(\d{1,2}(?:\.5)?)\b", re.I)
# e.g. PHI -2.5; the number may not run into further digits (KC +150 is a price, not a line)
SPREAD = re.compile(r"\b([A-Z]{2,3})\b.{0,12}?([+-]\d{1,2}(?:\.5)?)(?!\d)")
TEAM_CODE = re.compile(r"\b([A-Z]{2,3})\b")

STAKE_HINT = re.compile(r"stake|risk|wager", re.I)
PAYOUT_HINT = re.compile(r"to\s*win|payout|return", re.I)
OVER_UNDER_HINT = re.compile(r"over|under", re.I)


def _parse_money(line: str) -> Optional[float]:
    m = MONEY.search(line)
    return float(m.group(1).replace(",", "")) if m else None


def _parse_odds(token: str) -> int:
    return int(re.sub(r"\s+", "", token))


def _find_odds(line: str) -> Optional[int]:
    m = AMERICAN_ODDS.search(line)
    return _parse_odds(m.group(1)) if m else None


def _lookahead_odds(lines: List[str], i: int) -> Optional[int]:
    # Books often print the price on the line below the selection.
    if i + 1 < len(lines):
        odds = _find_odds(lines[i + 1])
        if odds is not None:
            return odds
    return _find_odds(lines[i])


def _extract_stake_payout(lines: List[str]) -> Tuple[Optional[float], Optional[float]]:
    stake: Optional[float] = None
    payout: Optional[float] = None
    # Later summary lines overwrite earlier ones.
    for l in lines:
        if STAKE_HINT.search(l):
            value = _parse_money(l)
            if value is not None:
                stake = value
        if PAYOUT_HINT.search(l):
            value = _parse_money(l)
            if value is not None:
                payout = value
    return stake, payout


def _total_leg(m: "re.Match", side: Side, lines: List[str], i: int) -> ParsedLeg:
    label = "Over" if side is Side.OVER else "Under"
    return ParsedLeg(
        market=Market.TOTAL,
        side=side,
        line=float(m.group(1)),
        odds_american=_lookahead_odds(lines, i),
        selection=f"{label} {m.group(1)}",
    )


def _spread_leg(m: "re.Match", lines: List[str], i: int) -> ParsedLeg:
    number = m.group(2)
    return ParsedLeg(
        market=Market.SPREAD,
        side=Side.HOME if number.startswith("-") else Side.AWAY,
        line=float(number),
        odds_american=_lookahead_odds(lines, i),
        selection=m.group(1),
    )


def _moneyline_leg(line: str) -> Optional[ParsedLeg]:
    team = TEAM_CODE.search(line)
    odds = AMERICAN_ODDS.search(line)
    if not team or not odds or OVER_UNDER_HINT.search(line):
        return None
    return ParsedLeg(
        market=Market.MONEYLINE,
        side=Side.TEAM,
        odds_american=_parse_odds(odds.group(1)),
        selection=team.group(1),
    )


def _detect_leg(lines: List[str], i: int) -> Optional[ParsedLeg]:
    l = lines[i]
    m = TOTAL_OVER.search(l)
    if m:
        return _total_leg(m, Side.OVER, lines, i)
    m = TOTAL_UNDER.search(l)
    if m:
        return _total_leg(m, Side.UNDER, lines, i)
    m = SPREAD.search(l)
    if m:
        return _spread_leg(m, lines, i)
    return _moneyline_leg(l)


def parse_slip_text(text: Optional[str], strip_noise: bool = False) -> ParseResult:
    """
    Turn the OCR text of one bet slip into wager legs plus slip totals.

    Lines are tested in order against Over, Under, spread and moneyline
    patterns; the first match claims the line. Totals and spreads take their
    odds from the following line when it carries a price, else from their own
    line. Stake and payout come from summary lines, and the stake is copied
    onto the leg only for single-leg slips.
    """
    lines = split_lines(normalize_ocr_text(text))
    if strip_noise:
        lines = strip_noise_lines(lines)

    stake, payout = _extract_stake_payout(lines)

    legs: List[ParsedLeg] = []
    for i in range(len(lines)):
        leg = _detect_leg(lines, i)
        if leg is not None:
            legs.append(leg)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Line {i} -> {leg.market.value} {leg.selection} line={leg.line} odds={leg.odds_american}")

    if len(legs) == 1 and stake is not None:
        legs[0] = replace(legs[0], units_staked=stake)

    logger.debug(f"Parsed {len(lines)} lines into {len(legs)} legs (stake={stake}, payout={payout}).")
    return ParseResult(legs=tuple(legs), stake=stake, payout=payout)
