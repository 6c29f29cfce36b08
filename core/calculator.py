"""计算器入口：tokenize -> infix_to_postfix -> evaluate"""
import logging

from config.config import AngleUnit, CalculatorConfig, validate_config
from core.converter import ShuntingYardConverter
from core.errors import EvalError, ParseError
from core.rpn_evaluator import RPNEvaluator
from core.token_system import format_tokens
from core.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class Calculator:
    """组合三个阶段，并给错误加上阶段前缀。无状态，可跨线程共享"""

    def __init__(self, config=None):
        """
        Args:
            config: CalculatorConfig、覆盖项字典、AngleUnit 或角度单位文本；None 取默认值
        """
        if config is None:
            config = CalculatorConfig()
        elif isinstance(config, dict):
            config = CalculatorConfig.from_dict(config)
        elif isinstance(config, (AngleUnit, str)):
            config = CalculatorConfig(angle_unit=config)
        self.config = validate_config(config)
        self.tokenizer = Tokenizer
        self.converter = ShuntingYardConverter
        self.rpn_evaluator = RPNEvaluator

    def calculate(self, expression):
        """
        Args:
            expression: 中缀表达式文本
        Returns:
            有限的 float
        Raises:
            ParseError: "error while parsing: ..."
            EvalError: "error while calculating: ..."
        """
        tokens = self.tokenizer.tokenize(expression)
        logger.debug(f"Tokens: {format_tokens(tokens)}")

        try:
            postfix = self.converter.infix_to_postfix(
                tokens, strict=self.config.strict_parentheses
            )
        except ParseError as e:
            logger.debug(f"Parse failed for {expression!r}: {e}")
            raise ParseError(f"error while parsing: {e}") from e
        logger.debug(f"Postfix: {format_tokens(postfix)}")

        try:
            return self.rpn_evaluator.evaluate(postfix, self.config.angle_unit)
        except EvalError as e:
            logger.debug(f"Evaluation failed for {expression!r}: {e}")
            raise EvalError(f"error while calculating: {e}") from e


def calculate(expression, config=None):
    return Calculator(config).calculate(expression)
