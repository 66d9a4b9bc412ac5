# highlight/colors.py

import math
from functools import lru_cache

SATURATION = 80
LIGHTNESS = 65


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _utf16_units(s: str):
    data = s.encode("utf-16-le")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def string_hash(s: str) -> int:
    """
    Rolling hash over UTF-16 code units: h = code + ((h << 5) - h),
    with the shift truncated to a signed 32-bit integer.
    """
    h = 0
    for code in _utf16_units(s):
        h = code + (_to_int32(_to_int32(h) << 5) - h)
    return h


def hsl_to_hex(h: float, s: float, l: float) -> str:
    l /= 100
    a = s * min(l, 1 - l) / 100

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        color = l - a * max(min(k - 3, 9 - k, 1), -1)
        # round half up
        return f"{int(math.floor(255 * color + 0.5)):02x}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"


@lru_cache(maxsize=4096)
def hash_color(token: str) -> str:
    hue = abs(string_hash(token)) % 360
    return hsl_to_hex(hue, SATURATION, LIGHTNESS)
