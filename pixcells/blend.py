"""Per-pixel compositing with layer blend modes, in single precision."""

from __future__ import annotations

import struct
from enum import IntEnum

_F32 = struct.Struct("<f")


def _f(value: float) -> float:
    """Round a value to the nearest single-precision float."""
    return _F32.unpack(_F32.pack(value))[0]


_U8F = tuple(_f(i / 255.0) for i in range(256))


class BlendMode(IntEnum):
    NORMAL = 0
    MULTIPLY = 1
    SCREEN = 2
    OVERLAY = 3
    ADD = 4


def _channels(pixel: int) -> tuple[float, float, float, float]:
    return (
        _U8F[pixel & 0xFF],
        _U8F[(pixel >> 8) & 0xFF],
        _U8F[(pixel >> 16) & 0xFF],
        _U8F[(pixel >> 24) & 0xFF],
    )


def _blend_channel(s: float, d: float, mode: int) -> float:
    if mode == BlendMode.MULTIPLY:
        return _f(s * d)
    if mode == BlendMode.SCREEN:
        return _f(1.0 - _f(_f(1.0 - s) * _f(1.0 - d)))
    if mode == BlendMode.OVERLAY:
        if d < 0.5:
            return _f(_f(2.0 * s) * d)
        return _f(1.0 - _f(_f(2.0 * _f(1.0 - s)) * _f(1.0 - d)))
    if mode == BlendMode.ADD:
        return min(_f(s + d), 1.0)
    return s


def _mix(b: float, s: float, d: float, sa: float, da: float, oa: float) -> float:
    term1 = _f(_f(b * sa) * da)
    term2 = _f(_f(s * sa) * _f(1.0 - da))
    term3 = _f(_f(d * da) * _f(1.0 - sa))
    return _f(_f(_f(term1 + term2) + term3) / oa)


def _to_byte(value: float) -> int:
    return int(_f(value * 255.0))


def blend_pixel(dst: int, src: int, mode: int) -> int:
    """Composite src over dst with the given blend mode; unknown modes act as normal."""
    sr, sg, sb, sa = _channels(src)
    if sa <= 0.0:
        return dst
    dr, dg, db, da = _channels(dst)

    br = _blend_channel(sr, dr, mode)
    bg = _blend_channel(sg, dg, mode)
    bb = _blend_channel(sb, db, mode)

    oa = _f(sa + _f(da * _f(1.0 - sa)))
    if oa == 0.0:
        return 0
    out_r = _mix(br, sr, dr, sa, da, oa)
    out_g = _mix(bg, sg, dg, sa, da, oa)
    out_b = _mix(bb, sb, db, sa, da, oa)
    result = (
        (_to_byte(oa) << 24)
        | (_to_byte(out_b) << 16)
        | (_to_byte(out_g) << 8)
        | _to_byte(out_r)
    )
    return result & 0xFFFFFFFF


def apply_opacity(src: int, opacity: float) -> int:
    """Scale a pixel's alpha by a layer opacity below one."""
    if opacity >= 1.0:
        return src
    alpha = (src >> 24) & 0xFF
    scaled = max(0, int(_f(alpha * _f(opacity)))) & 0xFF
    return (src & 0x00FFFFFF) | (scaled << 24)