"""键盘模块 - 输入组装与显示映射"""
from .display import to_display, from_display, format_number, render_expression
from .session import KeypadSession

__all__ = ['to_display', 'from_display', 'format_number', 'render_expression', 'KeypadSession']
