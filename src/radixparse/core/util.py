from __future__ import annotations
from typing import Dict, Any
from .model import ParseResult

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# ASCII only; str.isdigit() would also admit non-ASCII digits
DIGIT_VALUES: Dict[str, int] = {
    **{c: i for i, c in enumerate("0123456789")},
    **{c: 10 + i for i, c in enumerate("abcdef")},
    **{c: 10 + i for i, c in enumerate("ABCDEF")},
}


def digits_for(radix: int) -> frozenset[str]:
    """Return the legal digit characters for `radix` (both cases for letters)."""
    return frozenset(c for c, v in DIGIT_VALUES.items() if v < radix)


def result_asdict(res: ParseResult) -> Dict[str, Any]:
    """Return a JSON-serialisable dict."""
    if not res.success:
        return {"success": False, "error": res.error.value if res.error else None, "message": res.message, "value": 0}
    return {"success": True, "value": res.value}
