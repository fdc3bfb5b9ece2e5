import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# League defaults: groups of three, pairs allowed when the pool runs dry,
# four only through forced placement of a single straggler.
DEFAULT_TARGET_GROUP_SIZE = 3
DEFAULT_MIN_GROUP_SIZE = 2
DEFAULT_MAX_GROUP_SIZE = 4
DEFAULT_MAX_ATTEMPTS = 11


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class MatchmakingConfig:
    """Run parameters for one matchmaking run.

    max_attempts counts the first pass, so the default of 11 allows ten
    disband-and-retry rounds.
    """

    target_group_size: int = DEFAULT_TARGET_GROUP_SIZE
    min_group_size: int = DEFAULT_MIN_GROUP_SIZE
    max_group_size: int = DEFAULT_MAX_GROUP_SIZE
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    # False keeps the group average from before a forced insertion
    recompute_average_on_placement: bool = True

    def __post_init__(self):
        if self.min_group_size < 2:
            raise ValueError(f"min_group_size must be at least 2, got {self.min_group_size}")
        if not self.min_group_size <= self.target_group_size <= self.max_group_size:
            raise ValueError(
                "Group sizes must satisfy min <= target <= max, got "
                f"{self.min_group_size}/{self.target_group_size}/{self.max_group_size}"
            )
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")

    @classmethod
    def from_env(cls) -> "MatchmakingConfig":
        """Build a config from MATCHER_* environment variables (and .env)."""
        return cls(
            target_group_size=_env_int("MATCHER_TARGET_GROUP_SIZE", DEFAULT_TARGET_GROUP_SIZE),
            min_group_size=_env_int("MATCHER_MIN_GROUP_SIZE", DEFAULT_MIN_GROUP_SIZE),
            max_group_size=_env_int("MATCHER_MAX_GROUP_SIZE", DEFAULT_MAX_GROUP_SIZE),
            max_attempts=_env_int("MATCHER_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
            recompute_average_on_placement=_env_bool("MATCHER_RECOMPUTE_AVERAGE", True),
        )


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Root logging setup shared by the CLI and the API server."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
