"""核心模块 - Token系统、词法分析、调度场转换、RPN评估器和操作符"""
from .errors import CalculatorError, ParseError, EvalError, NumericError
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, PRECEDENCE, IDENTIFIERS
)
from .tokenizer import Tokenizer, tokenize
from .converter import ShuntingYardConverter, infix_to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate_postfix
from .operators import Operators
from .calculator import Calculator, calculate

__all__ = [
    'CalculatorError', 'ParseError', 'EvalError', 'NumericError',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'PRECEDENCE', 'IDENTIFIERS',
    'Tokenizer', 'tokenize', 'ShuntingYardConverter', 'infix_to_postfix',
    'RPNEvaluator', 'evaluate_postfix', 'Operators',
    'Calculator', 'calculate'
]
