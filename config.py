import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == "true"


@dataclass
class Config:
    # Debug
    debug_logging: bool = False

    # Review step
    leg_confidence: float = 0.6

    # Event matching
    team_match_threshold: float = 80.0

    # Router
    strip_noise_lines: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            debug_logging=_env_flag("DEBUG_LOGGING", "false"),
            leg_confidence=float(os.environ.get("LEG_CONFIDENCE", "0.6")),
            team_match_threshold=float(os.environ.get("TEAM_MATCH_THRESHOLD", "80")),
            strip_noise_lines=_env_flag("STRIP_NOISE_LINES", "false"),
        )
