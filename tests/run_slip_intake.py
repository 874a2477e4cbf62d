"""
Test harness for slip intake.
Usage:
    python tests/run_slip_intake.py <ocr_text_path> [events_json_path]

This will:
- Load the OCR text dumped for one slip
- Parse it into a ParseResult
- Attach review confidence to each leg
- Optionally match each leg to a known event (JSON list of {id, home_team, away_team})
- Print structured output for diagnostics
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from config import Config
from events import match_legs
from parsing import parse_slip_text
from slip_legs import build_leg_rows


def main(text_path: str, events_path: Optional[str] = None):
    config = Config.from_env()
    logging.basicConfig(
        level=logging.DEBUG if config.debug_logging else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    text = Path(text_path).read_text(encoding="utf-8")
    print("=== OCR TEXT ===")
    print(text)

    parsed = parse_slip_text(text, strip_noise=config.strip_noise_lines)

    events = json.loads(Path(events_path).read_text(encoding="utf-8")) if events_path else []
    matches = match_legs(parsed.legs, events, config.team_match_threshold)

    print("\n=== PARSED SLIP ===")
    print(f"Stake: {parsed.stake}, Payout: {parsed.payout}")
    rows = build_leg_rows(Path(text_path).stem, parsed, config.leg_confidence)
    for row, match in zip(rows, matches):
        print(
            f"Leg {row['leg_index'] + 1}: {row['market']} | {row['side']} | {row['selection']} | "
            f"Line: {row['line']} | Odds: {row['odds_american']} | Units: {row['units_staked']} | "
            f"Conf: {row['confidence']}"
        )
        if events_path:
            if match:
                print(f"    Event: {match.event_id} ({match.role}, score {match.score:.0f})")
            else:
                print("    Event: no match")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python tests/run_slip_intake.py <ocr_text_path> [events_json_path]")
        sys.exit(1)
    main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
