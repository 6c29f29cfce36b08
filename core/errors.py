"""计算器异常层级

模块保持无依赖：各阶段和测试都会导入它。
"""


class CalculatorError(ValueError):
    """计算器所有错误的基类"""


class ParseError(CalculatorError):
    """中缀转后缀时遇到无法识别的Token"""


class EvalError(CalculatorError):
    """后缀表达式求值失败（操作数不足、栈不平衡、数值错误）"""


class NumericError(CalculatorError, ArithmeticError):
    """数值运算的溢出或定义域错误"""
