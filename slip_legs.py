import logging
from typing import List, Dict, Any, Optional

from parsing import ParseResult

logger = logging.getLogger("slip_legs")

DEFAULT_CONFIDENCE = 0.6


def build_leg_rows(slip_id: str, result: ParseResult, confidence: float = DEFAULT_CONFIDENCE) -> List[Dict[str, Any]]:
    """Rows for the review step, one per parsed leg in slip order."""
    rows = []
    for i, leg in enumerate(result.legs):
        rows.append({
            "slip_id": slip_id,
            "leg_index": i,
            "market": leg.market.value,
            "selection": leg.selection,
            "side": leg.side.value,
            "line": leg.line,
            "odds_american": leg.odds_american,
            "units_staked": leg.units_staked,
            "potential_payout": None,
            "confidence": confidence,
            "parsed_json": leg.to_dict(),
        })
    logger.debug(f"Built {len(rows)} leg rows for slip {slip_id}.")
    return rows


def summarize_slip(result: ParseResult, ocr_text: Optional[str]) -> Dict[str, Any]:
    return {
        "ocr_text": ocr_text or "",
        "status": "parsed",
        "parlay_units_staked": result.stake,
        "parlay_payout": result.payout,
        "legs_count": len(result.legs),
    }
