"""词法分析：把表达式文本切成Token序列

不做任何校验。非法片段（如 "23.3.5"、未知标识符）原样保留为 UNPARSED，
由转换器统一拒绝。
"""
from core.token_system import (
    Token, TokenType, TOKEN_DEFINITIONS, OPERATOR_SYMBOLS,
    UNARY_MINUS, SCALE_UP, SCALE_DOWN, OPEN_PAREN, CLOSE_PAREN,
    number_token, identifier_token, power_of_ten_token
)

EXPONENT_MARKER = 'e'
EXPONENT_SIGNS = {'+': SCALE_UP, '-': SCALE_DOWN}


def _is_numeric_char(char):
    """只认 ASCII 数字，其它数字字符按未知符号处理"""
    return '0' <= char <= '9' or char == '.'


class Tokenizer:
    """单次使用的扫描器，每次 tokenize 调用都新建一个"""

    def __init__(self, expression):
        self.chars = list(expression)  # 按码点扫描
        self.tokens = []
        self._literal = []
        self._identifier = []

    @classmethod
    def tokenize(cls, expression):
        return cls(expression).run()

    def run(self):
        i = 0
        while i < len(self.chars):
            char = self.chars[i]

            if _is_numeric_char(char):
                self._flush_identifier()
                self._literal.append(char)
                i += 1
                continue

            if char == EXPONENT_MARKER and self._literal:
                consumed = self._match_scientific(i)
                if consumed:
                    i += consumed
                    continue

            self._flush_literal()

            if char.isalpha():
                self._identifier.append(char)
                i += 1
                continue

            self._flush_identifier()

            if not char.isspace():
                self.tokens.append(self._symbol_token(char))
            i += 1

        self._flush_literal()
        self._flush_identifier()
        return self.tokens

    def _match_scientific(self, start):
        """
        尝试匹配 <尾数>e<符号><指数>
        Returns:
            匹配成功时消耗的字符数；失败返回0，此时 e 按普通标识符处理
        """
        sign_pos = start + 1
        if sign_pos >= len(self.chars) or self.chars[sign_pos] not in EXPONENT_SIGNS:
            return 0

        end = sign_pos + 1
        while end < len(self.chars) and _is_numeric_char(self.chars[end]):
            end += 1
        exponent_text = ''.join(self.chars[sign_pos + 1:end])
        if not exponent_text:
            return 0

        self._flush_literal()
        self.tokens.append(TOKEN_DEFINITIONS[EXPONENT_SIGNS[self.chars[sign_pos]]])
        exponent = number_token(exponent_text)
        if exponent.type == TokenType.NUMBER:
            self.tokens.append(power_of_ten_token(exponent.value))
        else:
            self.tokens.append(exponent)
        return end - start

    def _symbol_token(self, char):
        if char == '-' and self._is_unary_context():
            return TOKEN_DEFINITIONS[UNARY_MINUS]
        if char in OPERATOR_SYMBOLS or char in (OPEN_PAREN, CLOSE_PAREN):
            return TOKEN_DEFINITIONS[char]
        return Token(TokenType.UNPARSED, char)

    def _is_unary_context(self):
        """
        '-' 只在数字字面量、以数字或 . 结尾的片段、常数 e 之后为减号；
        其余情况（包括 ) 和 pi 之后）都是一元负号
        """
        if not self.tokens:
            return True
        last = self.tokens[-1]
        if last.type == TokenType.NUMBER:
            return False
        if last.type == TokenType.CONSTANT:
            return last.name != EXPONENT_MARKER
        if last.type == TokenType.UNPARSED:
            return not _is_numeric_char(last.name[-1])
        return True

    def _flush_literal(self):
        if self._literal:
            self.tokens.append(number_token(''.join(self._literal)))
            self._literal = []

    def _flush_identifier(self):
        if self._identifier:
            self.tokens.append(identifier_token(''.join(self._identifier)))
            self._identifier = []


def tokenize(expression):
    return Tokenizer.tokenize(expression)
