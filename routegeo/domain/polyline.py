"""
Encoded Polyline Codec
======================

Google / OSRM encoded-polyline format
-------------------------------------
Each point is stored as the signed *delta* from the previous point, for
latitude then longitude, scaled by ``10 ** precision`` (1e5 by default,
1e6 for OSRM ``polyline6``) and rounded to an integer.

Every delta is zig-zag encoded (``v << 1``, inverted when negative), then
split into 5-bit chunks, least significant first.  All chunks except the
last carry the continuation bit ``0x20``.  Each chunk is offset by 63 so
it lands in the printable range ``'?'`` .. ``'~'``.

Decoding is strict: a string that ends mid-value, or mid-point (latitude
without longitude), or that contains a character outside the alphabet,
raises ``DecodeError``.  No partial path is ever returned.

Complexity: O(n) in the length of the encoded string.
"""

from __future__ import annotations

import math
from typing import Iterable, Union

from .entities import Coordinate, Path

DEFAULT_PRECISION = 5

_OFFSET = 63
_CHUNK_BITS = 5
_CHUNK_MASK = 0x1F
_CONTINUE = 0x20
_MAX_CHUNK = 0x3F  # highest value reachable from '~'


class DecodeError(Exception):
    """Raised when an encoded polyline is malformed."""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


def _factor(precision: int) -> int:
    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 1:
        raise ValueError(f"precision must be a positive integer, got {precision!r}")
    return 10**precision


# ── Decoding ──────────────────────────────────────────────────────────


def _read_value(encoded: str, index: int) -> tuple[int, int]:
    """Decode one zig-zag value starting at *index*; return (delta, next_index)."""
    result = 0
    shift = 0
    length = len(encoded)
    while True:
        if index >= length:
            raise DecodeError(
                "Encoded polyline is truncated mid-value", position=index
            )
        b = ord(encoded[index]) - _OFFSET
        if b < 0 or b > _MAX_CHUNK:
            raise DecodeError(
                f"Invalid polyline character {encoded[index]!r}", position=index
            )
        index += 1
        result |= (b & _CHUNK_MASK) << shift
        shift += _CHUNK_BITS
        if b < _CONTINUE:
            break

    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, index


def decode(encoded: str, precision: int = DEFAULT_PRECISION) -> Path:
    """
    Decode *encoded* into a list of ``Coordinate`` in route order.

    The running latitude / longitude are integer accumulators so that
    long paths do not drift; division by the precision factor happens
    once per emitted point.
    """
    factor = _factor(precision)
    path: Path = []
    index = 0
    lat = 0
    lng = 0
    length = len(encoded)

    while index < length:
        dlat, index = _read_value(encoded, index)
        if index >= length:
            raise DecodeError(
                "Encoded polyline has a latitude without a longitude",
                position=index,
            )
        dlng, index = _read_value(encoded, index)
        lat += dlat
        lng += dlng
        path.append(Coordinate(lat / factor, lng / factor))

    return path


# ── Encoding ──────────────────────────────────────────────────────────


def _round_half_away(x: float) -> int:
    # Half away from zero, as the Google reference encoder rounds.
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _write_value(value: int, out: list[str]) -> None:
    value = ~(value << 1) if value < 0 else value << 1
    while value >= _CONTINUE:
        out.append(chr((_CONTINUE | (value & _CHUNK_MASK)) + _OFFSET))
        value >>= _CHUNK_BITS
    out.append(chr(value + _OFFSET))


def encode(
    path: Iterable[Union[Coordinate, tuple[float, float]]],
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Encode (lat, lng) points into a polyline string.  Inverse of ``decode``."""
    factor = _factor(precision)
    out: list[str] = []
    prev_lat = 0
    prev_lng = 0

    for point in path:
        if isinstance(point, Coordinate):
            latitude, longitude = point.latitude, point.longitude
        else:
            latitude, longitude = point
        ilat = _round_half_away(latitude * factor)
        ilng = _round_half_away(longitude * factor)
        _write_value(ilat - prev_lat, out)
        _write_value(ilng - prev_lng, out)
        prev_lat, prev_lng = ilat, ilng

    return "".join(out)
