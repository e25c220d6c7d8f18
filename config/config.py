"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "zero_literal": "0",         # 除零语法检查只识别这一文本
    "strict_fold": True,         # 折叠失败时抛出MalformedExpression；False则结果置为None
    "runtime_zero_check": True,  # 折叠时除数值为0同样抛出DivideByZero
}

# 显示参数：规范符号 -> 显示字形
DISPLAY_CONFIG = {
    "glyphs": {
        "*": "×",
        "/": "÷",
    },
}

# 键盘参数
KEYPAD_CONFIG = {
    "all_clear_keys": ("AC", "C", "A"),
    "equals_key": "=",
    "decimal_key": ".",
}

# 日志
LOG_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    glyphs = DISPLAY_CONFIG["glyphs"]
    assert len(set(glyphs.values())) == len(glyphs), "显示字形必须一一对应才能反向映射"
    assert not set(glyphs.values()) & {"+", "-", "*", "/"}, "显示字形不能与规范符号冲突"
    assert float(EVALUATOR_CONFIG["zero_literal"]) == 0, "零字面量必须解析为0"
    assert KEYPAD_CONFIG["equals_key"] not in KEYPAD_CONFIG["all_clear_keys"]
    return True
