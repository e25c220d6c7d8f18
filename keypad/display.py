"""keypad/display.py - 规范符号与显示字形之间的转换"""
from config.config import DISPLAY_CONFIG
from core import Token

GLYPHS = dict(DISPLAY_CONFIG["glyphs"])
SYMBOLS = {glyph: symbol for symbol, glyph in GLYPHS.items()}


def to_display(symbol):
    """规范符号 -> 显示字形；没有对应字形的原样返回"""
    return GLYPHS.get(symbol, symbol)


def from_display(glyph):
    """显示字形 -> 规范符号，是to_display的逆映射"""
    return SYMBOLS.get(glyph, glyph)


def format_number(value):
    """把数值转成Token文本（最短可往返表示，如 5.0）"""
    return repr(float(value))


def render_expression(tokens):
    """逐个映射为显示字形后直接拼接，不加分隔符"""
    return "".join(to_display(Token.from_text(token).text) for token in tokens)
