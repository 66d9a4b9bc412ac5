# tests/test_colors.py

import regex as re

from highlight.colors import hash_color, hsl_to_hex, string_hash

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


def test_known_colors():
    assert hash_color("") == "#ed5e5e"
    assert hash_color("a") == "#95ed5e"


def test_string_hash_rolls():
    assert string_hash("a") == 97
    assert string_hash("ab") == 98 + (97 << 5) - 97


def test_string_hash_wraps_to_32_bits():
    h = string_hash("CustomerSupportBotWithAVeryLongNameIndeed")
    assert -(2 ** 32) < h < 2 ** 32


def test_hash_color_format_and_stability():
    for token in ["UserService", "DataPipeline", "Zürich", "😀Emoji"]:
        color = hash_color(token)
        assert HEX_RE.match(color)
        hash_color.cache_clear()
        assert hash_color(token) == color


def test_hsl_to_hex_primaries():
    assert hsl_to_hex(0, 100, 50) == "#ff0000"
    assert hsl_to_hex(120, 100, 50) == "#00ff00"
    assert hsl_to_hex(240, 100, 50) == "#0000ff"
    assert hsl_to_hex(0, 0, 100) == "#ffffff"
