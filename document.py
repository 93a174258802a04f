"""Decoding of point documents and selection of the points to interpolate.

A document maps decimal x-coordinates to radix-encoded y-values, plus a
reserved section carrying the number of points to use:

    {"keys": {"k": 3},
     "1": {"base": "10", "value": "3"},
     "2": {"base": 2, "value": "110"},
     "3": {"base": "16", "value": "b"}}
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

import config
from core.errors import MalformedDocument, InsufficientPoints
from core.radix import decode

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def _coerce_int(value, what: str) -> int:
    """Accept an int, an integral float or a decimal string."""
    if isinstance(value, bool):
        raise MalformedDocument(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _DECIMAL.fullmatch(value.strip()):
        return int(value.strip(), 10)
    raise MalformedDocument(f"{what} must be an integer, got {value!r}")


def _require_mapping(document):
    if not isinstance(document, Mapping):
        raise MalformedDocument(
            f"Document must be a JSON object, got {type(document).__name__}")


def load_threshold(document) -> int:
    """Number of points k the document asks to interpolate through."""
    _require_mapping(document)
    section = document.get(config.THRESHOLD_SECTION)
    if not isinstance(section, Mapping) or config.THRESHOLD_FIELD not in section:
        raise MalformedDocument(
            f'JSON must contain "{config.THRESHOLD_SECTION}" '
            f'with "{config.THRESHOLD_FIELD}"')
    k = _coerce_int(section[config.THRESHOLD_FIELD],
                    f"{config.THRESHOLD_SECTION}.{config.THRESHOLD_FIELD}")
    if k < 1:
        raise MalformedDocument(f"Required point count must be at least 1, got {k}")
    return k


def _parse_x(key) -> int:
    if not isinstance(key, str) or not _DECIMAL.fullmatch(key.strip()):
        raise MalformedDocument(f"Point key {key!r} is not a decimal integer")
    return int(key.strip(), 10)


def _decode_entry(key: str, x: int, entry) -> Point:
    if not isinstance(entry, Mapping):
        raise MalformedDocument(f"Point {key!r} must be an object")
    for field in (config.BASE_FIELD, config.VALUE_FIELD):
        if field not in entry:
            raise MalformedDocument(f'Point {key!r} is missing "{field}"')

    base = _coerce_int(entry[config.BASE_FIELD], f"Point {key!r} base")
    lo, hi = config.RADIX_RANGE
    if not lo <= base <= hi:
        raise MalformedDocument(f"Point {key!r} base {base} outside [{lo}, {hi}]")
    value = entry[config.VALUE_FIELD]
    if not isinstance(value, str):
        raise MalformedDocument(f"Point {key!r} value must be a string")
    return Point(x, decode(value, base))


def _first_k(items: list, k: int, x_of) -> list:
    if len(items) < k:
        raise InsufficientPoints(len(items), k)
    ordered = sorted(items, key=x_of)
    if len(ordered) > k:
        logger.info(f"Using {k} of {len(ordered)} points; "
                    f"ignoring {len(ordered) - k} with larger x")
    return ordered[:k]


def count_entries(document) -> int:
    """Number of point entries, i.e. keys other than the reserved section."""
    _require_mapping(document)
    return sum(1 for key in document if key != config.THRESHOLD_SECTION)


def load_points(document, k: int | None = None) -> list[Point]:
    """Decode point entries.

    With k=None every entry is decoded, in document order. Otherwise the
    entries are sorted by x and only the first k are decoded and validated;
    the rest are ignored beyond their x-coordinate.
    """
    _require_mapping(document)
    entries = [(_parse_x(key), key, entry) for key, entry in document.items()
               if key != config.THRESHOLD_SECTION]
    if k is not None:
        entries = _first_k(entries, k, x_of=lambda e: e[0])
    points = [_decode_entry(key, x, entry) for x, key, entry in entries]
    logger.debug(f"Decoded {len(points)} points")
    return points


def select_points(points: list[Point], k: int) -> list[Point]:
    """First k points by ascending x. Extra points are ignored."""
    return _first_k(points, k, x_of=lambda p: p.x)
