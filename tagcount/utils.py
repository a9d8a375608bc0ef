from __future__ import annotations
import os, sys, re, argparse
from typing import Iterable, List, Optional

def split_csv(raw: str) -> List[str]:
    return [p.strip() for p in raw.split(",") if p.strip()]

def is_excluded(item: str, patterns: Iterable[re.Pattern]) -> bool:
    return any(p.search(item) for p in patterns)

def compile_patterns(raw: Iterable[str]) -> List[re.Pattern]:
    """Compile every pattern; a bad one raises re.error."""
    return [re.compile(p) for p in raw]

def compile_patterns_from_env(env_var: str) -> List[re.Pattern]:
    raw = os.getenv(env_var, "").strip()
    if not raw:
        return []
    compiled: List[re.Pattern] = []
    for p in split_csv(raw):
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            print(f"[!] Invalid regex in {env_var}: {p} ({e}), ignored.", file=sys.stderr)
    return compiled

def parse_limit_from_env(env_var: str) -> Optional[int]:
    raw = os.getenv(env_var, "").strip()
    if not raw:
        return None
    try:
        return positive_int(raw)
    except argparse.ArgumentTypeError as e:
        print(f"[!] Invalid {env_var}: {e}, ignored.", file=sys.stderr)
        return None

# ---- argparse types -------------------------------------------------

def positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {raw!r}")
    return value

def regex_list(raw: str) -> List[re.Pattern]:
    try:
        return compile_patterns(split_csv(raw))
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid regex in {raw!r}: {e}")
