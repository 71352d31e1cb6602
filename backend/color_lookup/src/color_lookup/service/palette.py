import logging
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping

from ..config import settings
from ..models.schemas import ColorResult

logger = logging.getLogger(settings.SERVICE_NAME + ".palette")

INVALID_COLOR_CODE = "invalid_color_code"

# Superset of two conflicting historical tables; one of them had no "white".
COLOR_TABLE: Mapping[str, str] = MappingProxyType({
    "red": "#f00",
    "blue": "#00f",
    "green": "#0f0",
    "white": "#fff",
})


class InvalidColorCode(ValueError):
    """Raised when a color code is not one of the known keys."""

    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"invalid color: {code!r}")


def return_color(code: str) -> str:
    """
    Return the hex color string for a color code.

    Matching is exact: "Red" or " red" are not valid codes.

    Args:
        code: One of the keys of COLOR_TABLE (e.g. "red")

    Returns:
        Hex color string such as "#f00"

    Raises:
        InvalidColorCode: if the code is not a known key
    """
    if not isinstance(code, str) or code not in COLOR_TABLE:
        logger.debug(f"Unknown color code requested: {code!r}")
        raise InvalidColorCode(code)
    return COLOR_TABLE[code]


def known_codes() -> List[str]:
    return list(COLOR_TABLE)


def is_known_color(code: Any) -> bool:
    return isinstance(code, str) and code in COLOR_TABLE


def lookup_color(code: str) -> ColorResult:
    """
    Look up a color code without raising.
    Unknown codes come back as an error result instead of an exception.
    """
    try:
        hex_value = return_color(code)
    except InvalidColorCode as e:
        return ColorResult(
            code=str(code),
            status="error",
            error=INVALID_COLOR_CODE,
            message=str(e),
        )
    return ColorResult(code=code, status="ok", hex=hex_value)


def lookup_colors(codes: Iterable[str]) -> List[ColorResult]:
    """Look up several codes, keeping input order and duplicates."""
    results = [lookup_color(code) for code in codes]
    missing = sum(1 for r in results if not r.ok)
    if missing:
        logger.info(f"Batch lookup: {len(results) - missing} found, {missing} unknown")
    return results


if __name__ == "__main__":
    for code in known_codes() + ["purple"]:
        print(lookup_color(code).model_dump(exclude_none=True))
