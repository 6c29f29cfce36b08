"""core/token_system.py"""
import math
from collections import namedtuple
from enum import Enum
from types import MappingProxyType

import numpy as np


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    OPERATOR = "operator"  # + - * / ^ ~ 以及科学计数法标记
    FUNCTION = "function"  # sqrt ln exp sin cos tg ctg
    CONSTANT = "constant"  # e, pi
    PAREN = "paren"  # ( )
    UNPARSED = "unparsed"  # 无法识别的原始文本，留给转换器拒绝


class Token(namedtuple('Token', ['type', 'name', 'value', 'arity', 'op'])):
    """
    不可变的Token
    Args:
        type: TokenType
        name: 源文本或规范符号
        value: NUMBER/CONSTANT 的数值
        arity: 操作符/函数需要的操作数个数
        op: 对应 Operators 中的方法名
    """
    __slots__ = ()

    def __new__(cls, token_type, name, value=None, arity=0, op=None):
        return super().__new__(cls, token_type, name, value, arity, op)

    @property
    def is_operand(self):
        return self.type in (TokenType.NUMBER, TokenType.CONSTANT)

    @property
    def is_callable(self):
        return self.type in (TokenType.OPERATOR, TokenType.FUNCTION)

    def __str__(self):
        return self.name


UNARY_MINUS = '~'
SCALE_UP = '×10^'  # mantissa × 10^exp
SCALE_DOWN = '÷10^'  # mantissa ÷ 10^exp
OPEN_PAREN = '('
CLOSE_PAREN = ')'

# 固定词表
TOKEN_DEFINITIONS = MappingProxyType({
    # 括号
    OPEN_PAREN: Token(TokenType.PAREN, OPEN_PAREN),
    CLOSE_PAREN: Token(TokenType.PAREN, CLOSE_PAREN),

    # 二元操作符
    '+': Token(TokenType.OPERATOR, '+', arity=2, op='add'),
    '-': Token(TokenType.OPERATOR, '-', arity=2, op='sub'),
    '*': Token(TokenType.OPERATOR, '*', arity=2, op='mul'),
    '/': Token(TokenType.OPERATOR, '/', arity=2, op='div'),
    '^': Token(TokenType.OPERATOR, '^', arity=2, op='pow'),
    SCALE_UP: Token(TokenType.OPERATOR, SCALE_UP, arity=2, op='mul'),
    SCALE_DOWN: Token(TokenType.OPERATOR, SCALE_DOWN, arity=2, op='div'),

    # 一元操作符
    UNARY_MINUS: Token(TokenType.OPERATOR, UNARY_MINUS, arity=1, op='neg'),

    # 函数
    'sqrt': Token(TokenType.FUNCTION, 'sqrt', arity=1, op='sqrt'),
    'ln': Token(TokenType.FUNCTION, 'ln', arity=1, op='ln'),
    'exp': Token(TokenType.FUNCTION, 'exp', arity=1, op='exp'),
    'sin': Token(TokenType.FUNCTION, 'sin', arity=1, op='sin'),
    'cos': Token(TokenType.FUNCTION, 'cos', arity=1, op='cos'),
    'tg': Token(TokenType.FUNCTION, 'tg', arity=1, op='tan'),
    'ctg': Token(TokenType.FUNCTION, 'ctg', arity=1, op='cot'),

    # 常数
    'e': Token(TokenType.CONSTANT, 'e', value=math.e),
    'pi': Token(TokenType.CONSTANT, 'pi', value=math.pi),
})

# 单字符操作符（词法层面直接识别）
OPERATOR_SYMBOLS = frozenset('+-*/^')

# 标识符 -> 函数/常数
IDENTIFIERS = MappingProxyType({
    name: token for name, token in TOKEN_DEFINITIONS.items()
    if token.type in (TokenType.FUNCTION, TokenType.CONSTANT)
})

# 需要做角度换算的函数
TRIGONOMETRIC_FUNCTIONS = frozenset(['sin', 'cos', 'tg', 'ctg'])

# 优先级：( < 加减 < 乘除 < 一元负号 < 幂/函数/科学计数法标记
PRECEDENCE = MappingProxyType({
    OPEN_PAREN: 0,
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    UNARY_MINUS: 3,
    '^': 4,
    SCALE_UP: 4,
    SCALE_DOWN: 4,
    **{name: 4 for name, token in TOKEN_DEFINITIONS.items() if token.type == TokenType.FUNCTION},
})

# 报错时使用的操作名称
OPERATION_NAMES = MappingProxyType({
    'neg': 'unary minus',
    'add': 'addition',
    'sub': 'subtraction',
    'mul': 'multiplication',
    'div': 'division',
    'pow': 'power',
    'sqrt': 'square root',
    'ln': 'natural logarithm',
    'exp': 'exponent',
    'sin': 'sine',
    'cos': 'cosine',
    'tan': 'tangent',
    'cot': 'cotangent',
})


def number_token(text):
    """把数字文本变成 NUMBER Token；多个小数点等非法文本保留为 UNPARSED"""
    try:
        value = float(text)
    except ValueError:
        return Token(TokenType.UNPARSED, text)
    if not math.isfinite(value):
        # 超出 double 范围的字面量
        return Token(TokenType.UNPARSED, text)
    return Token(TokenType.NUMBER, text, value=value)


def power_of_ten_token(exponent):
    """科学计数法中预先计算好的 10^exponent"""
    with np.errstate(over='ignore'):
        value = float(np.power(10.0, exponent))
    return Token(TokenType.NUMBER, np.format_float_positional(value, trim='-'), value=value)


def identifier_token(text):
    """已知标识符映射为函数/常数，其余保留为 UNPARSED"""
    return IDENTIFIERS.get(text, Token(TokenType.UNPARSED, text))


def format_tokens(tokens):
    return ' '.join(token.name for token in tokens)
