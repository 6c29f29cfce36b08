"""core/operators.py"""
import math

import numpy as np

from core.errors import NumericError

MAX_VALUE = float(np.finfo(np.float64).max)  # 最大有限值
LN_MAX_VALUE = math.log(MAX_VALUE)  # exp 的溢出阈值
HALF_PI = math.pi / 2


class Operators:
    """所有操作符的静态方法集合，返回有限的 float 或抛出 NumericError"""

    @staticmethod
    def _ensure_finite(*operands):
        """科学计数法的 10^exp 可能已经是 inf，按溢出处理"""
        for operand in operands:
            if not math.isfinite(operand):
                raise NumericError("overflow")

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        """一元负号"""
        return -operand

    @staticmethod
    def sqrt(operand):
        if operand < 0:
            raise NumericError(f"negative operand: {operand!r}")
        return math.sqrt(operand)

    @staticmethod
    def ln(operand):
        if operand <= 0:
            raise NumericError(f"non-positive operand: {operand!r}")
        return math.log(operand)

    @staticmethod
    def exp(operand):
        if operand > LN_MAX_VALUE:
            raise NumericError("overflow")
        return math.exp(operand)

    @staticmethod
    def sin(operand):
        return math.sin(operand)

    @staticmethod
    def cos(operand):
        return math.cos(operand)

    @staticmethod
    def tan(operand):
        """正切：operand/(π/2) 为整数时报错"""
        if (operand / HALF_PI).is_integer():
            raise NumericError("undefined at integer multiples of π/2")
        return math.tan(operand)

    @staticmethod
    def cot(operand):
        """余切：operand/π 为整数时无定义"""
        if (operand / math.pi).is_integer():
            raise NumericError("undefined at multiples of π")
        return 1.0 / math.tan(operand)

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法：先比较边界，再相加"""
        Operators._ensure_finite(operand1, operand2)
        if operand2 > 0:
            if operand1 > MAX_VALUE - operand2:
                raise NumericError("overflow")
        elif operand1 < -MAX_VALUE - operand2:
            raise NumericError("overflow")
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        return Operators.add(operand1, -operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法：|a| > MAX/|b| 即溢出"""
        Operators._ensure_finite(operand1, operand2)
        if operand2 != 0 and abs(operand1) > MAX_VALUE / abs(operand2):
            raise NumericError("overflow")
        return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """除法：乘以倒数。极小的除数在倒数这一步就会溢出，同样报 overflow"""
        if operand2 == 0:
            raise NumericError("division by zero")
        return Operators.mul(operand1, 1.0 / operand2)

    @staticmethod
    def pow(operand1, operand2):
        """幂运算"""
        Operators._ensure_finite(operand1, operand2)
        if operand1 > 1 and operand2 > 1 and operand2 > LN_MAX_VALUE / math.log(operand1):
            raise NumericError("overflow")
        if operand1 == 0 and operand2 < 0:
            raise NumericError("division by zero")

        with np.errstate(all='ignore'):
            result = float(np.power(operand1, operand2))
        if math.isnan(result):
            # 负底数的非整数次幂
            raise NumericError(f"undefined result for {operand1!r} ^ {operand2!r}")
        if math.isinf(result):
            raise NumericError("overflow")
        return result
