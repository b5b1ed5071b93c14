import json
from typing import Optional

from minim.types.expression import Expression, List, Builtin, Closure, Boolean, Number
from minim.types.symbol import Symbol
from minim.evaluation.special_forms import SPECIAL_FORMS

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_CLOSURE = "\033[92m"
COLOR_BUILTIN = "\033[95m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_NUMBER = "\033[36m"
COLOR_BOOLEAN = "\033[93m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "display_legend": False,
    "color_symbols": True,
    "color_closures": True,
    "color_builtins": True,
    "color_special_forms": True,
    "color_numbers": True,
    "color_booleans": True,
}

NO_COLOR_OPTIONS = {
    **DEFAULT_OPTIONS,
    "color_symbols": False,
    "color_closures": False,
    "color_builtins": False,
    "color_special_forms": False,
    "color_numbers": False,
    "color_booleans": False,
}


# ----------------- Colorize utility -----------------
def colorize(obj: Expression, options: Optional[dict] = None) -> str:
    if options is None:
        options = DEFAULT_OPTIONS
    text = str(obj)
    match obj:
        case Symbol() if obj in SPECIAL_FORMS:
            if options.get("color_special_forms", True):
                return f"{COLOR_SPECIAL_FORM}{text}{RESET}"
        case Symbol():
            if options.get("color_symbols", True):
                return f"{COLOR_SYMBOL}{text}{RESET}"
        case Closure():
            if options.get("color_closures", True):
                return f"{COLOR_CLOSURE}{text}{RESET}"
        case Builtin():
            if options.get("color_builtins", True):
                return f"{COLOR_BUILTIN}{text}{RESET}"
        case Number():
            if options.get("color_numbers", True):
                return f"{COLOR_NUMBER}{text}{RESET}"
        case Boolean():
            if options.get("color_booleans", True):
                return f"{COLOR_BOOLEAN}{text}{RESET}"
    return text


def _legend() -> str:
    legend_items = [
        f"{COLOR_SYMBOL}Symbol{RESET}",
        f"{COLOR_SPECIAL_FORM}Special Form{RESET}",
        f"{COLOR_NUMBER}Number{RESET}",
        f"{COLOR_BOOLEAN}Boolean{RESET}",
        f"{COLOR_BUILTIN}Builtin{RESET}",
        f"{COLOR_CLOSURE}Closure{RESET}",
    ]
    return "Color Key: " + " | ".join(legend_items) + "\n"


# ----------------- Pretty printer -----------------
def pprint_expr(expr: Expression, options: Optional[dict] = None) -> str:
    """Render `expr` with the display contract's punctuation, colored per `options`."""
    if options is None:
        options = DEFAULT_OPTIONS

    legend_str = _legend() if options.get("display_legend", False) else ""
    return legend_str + _render(expr, options)


def _render(expr: Expression, options: dict) -> str:
    if not isinstance(expr, List):
        return colorize(expr, options)
    return "(" + ",".join(_render(e, options) for e in expr) + ")"


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str, defaults: Optional[dict] = None) -> dict:
    """Merge a JSON object of option overrides over `defaults`.

    Malformed JSON or a non-object leaves the defaults unchanged.
    """
    if defaults is None:
        defaults = DEFAULT_OPTIONS
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return dict(defaults)
    if not isinstance(user_opts, dict):
        return dict(defaults)
    return {**defaults, **user_opts}
