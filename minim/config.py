from __future__ import annotations
import os


# Defaults
_DEFAULT_PROMPT = "minim> "
_DEFAULT_RECURSION_LIMIT = 10000

_FALSEY = {"0", "false", "no", "off"}


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSEY


def get_prompt() -> str:
    return os.environ.get("MINIM_PROMPT") or _DEFAULT_PROMPT


def get_recursion_limit() -> int:
    return int_from_env("MINIM_RECURSION_LIMIT", _DEFAULT_RECURSION_LIMIT)


def get_color_enabled() -> bool:
    return flag_from_env("MINIM_COLOR", True)


def get_pprint_options() -> str | None:
    """Raw JSON object of pretty-printer overrides for the REPL, if set."""
    raw = os.environ.get("MINIM_PPRINT_OPTIONS")
    return raw if raw and raw.strip() else None
