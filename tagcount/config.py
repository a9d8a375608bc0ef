from __future__ import annotations
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .utils import compile_patterns, compile_patterns_from_env, parse_limit_from_env

# ---- Default exclusions --------------------------------------------
# Notes whose file name matches are skipped entirely
DEFAULT_FILE_EXCLUSIONS = (r"Indexes",)

# Tags still counted, but dropped from the report after ranking
DEFAULT_TAG_EXCLUSIONS = (
    r"coachingPainCause/.*",
    r"coachingPhase/.*",
    r"emotion/.*",
    r"pain",
    r"30x500",
    r"techAgileCoaching",
)

DEFAULT_LIMIT = 5

# ---- Environment overrides (.env supported) ------------------------
ENV_EXCLUDE_FILES = "TAG_COUNT_EXCLUDE_FILES"
ENV_EXCLUDE_TAGS = "TAG_COUNT_EXCLUDE_TAGS"
ENV_LIMIT = "TAG_COUNT_LIMIT"


class Extreme(str, Enum):
    MOST = "Most"
    LEAST = "Least"


@dataclass(frozen=True)
class RankerConfig:
    file_exclusions: Tuple[re.Pattern, ...] = tuple(compile_patterns(DEFAULT_FILE_EXCLUSIONS))
    tag_exclusions: Tuple[re.Pattern, ...] = tuple(compile_patterns(DEFAULT_TAG_EXCLUSIONS))
    extreme: Extreme = Extreme.MOST
    limit: int = DEFAULT_LIMIT
    verbose: bool = False

    def __post_init__(self):
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise ValueError(f"limit must be a positive integer, got {self.limit!r}")
        # accept "Most"/"Least" as well as the enum members
        object.__setattr__(self, "extreme", Extreme(self.extreme))

    def with_overrides(self, **changes: Any) -> "RankerConfig":
        """Copy of this config with every non-None keyword applied."""
        kept = {k: v for k, v in changes.items() if v is not None}
        for key in ("file_exclusions", "tag_exclusions"):
            if key in kept:
                kept[key] = tuple(kept[key])
        return replace(self, **kept)

    def describe(self) -> Dict[str, Any]:
        return {
            "file_exclusions": [p.pattern for p in self.file_exclusions],
            "tag_exclusions": [p.pattern for p in self.tag_exclusions],
            "extreme": self.extreme.value,
            "limit": self.limit,
            "verbose": self.verbose,
        }


DEFAULT_CONFIG = RankerConfig()


def load_config_from_env(base: Optional[RankerConfig] = None) -> RankerConfig:
    base = base or DEFAULT_CONFIG
    # unset, empty or all-invalid variables keep the base value
    return base.with_overrides(
        file_exclusions=compile_patterns_from_env(ENV_EXCLUDE_FILES) or None,
        tag_exclusions=compile_patterns_from_env(ENV_EXCLUDE_TAGS) or None,
        limit=parse_limit_from_env(ENV_LIMIT),
    )
