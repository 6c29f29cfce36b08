"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from config.config import AngleUnit
from core.errors import EvalError, NumericError
from core.operators import Operators
from core.token_system import TRIGONOMETRIC_FUNCTIONS, OPERATION_NAMES, TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, angle_unit=AngleUnit.RADIAN):
        """
        Args:
            token_sequence: 后缀Token序列
            angle_unit: 三角函数参数的角度单位
        Returns:
            float 结果
        Raises:
            EvalError: 操作数不足、栈不平衡或数值错误
        """
        stack = []

        for token in token_sequence:
            if token.is_operand:
                stack.append(token.value)
                continue

            if not token.is_callable:
                raise EvalError(f"unexpected token: {token.name}")

            if len(stack) < token.arity:
                if token.op == 'neg':
                    raise EvalError("not enough operands for unary minus")
                raise EvalError(f"not enough operands for operation {token.name}")

            # operand2 在栈顶
            operands = stack[len(stack) - token.arity:]
            del stack[len(stack) - token.arity:]

            if (token.type == TokenType.FUNCTION and token.name in TRIGONOMETRIC_FUNCTIONS
                    and angle_unit == AngleUnit.DEGREE):
                operands = [float(np.deg2rad(operands[0]))]

            op_method = getattr(Operators, token.op)
            try:
                result = op_method(*operands)
            except NumericError as e:
                raise EvalError(f"calculating {OPERATION_NAMES[token.op]}: {e}") from e
            stack.append(result)

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvalError("invalid expression")

        return stack[0]


def evaluate_postfix(token_sequence, angle_unit=AngleUnit.RADIAN):
    return RPNEvaluator.evaluate(token_sequence, angle_unit)
