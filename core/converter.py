"""中缀 -> 后缀（调度场算法）"""
import logging

from core.errors import ParseError
from core.token_system import TokenType, PRECEDENCE, OPEN_PAREN, CLOSE_PAREN

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """按优先级表把中缀Token序列改写为逆波兰序列"""

    @staticmethod
    def infix_to_postfix(tokens, strict=False):
        """
        Args:
            tokens: tokenize 的输出
            strict: 是否在检测到括号不匹配时立即报错；
                    默认不检查，不匹配的括号在求值阶段以栈不平衡的形式暴露
        Returns:
            新的后缀Token列表
        """
        output = []
        stack = []

        for token in tokens:
            if token.is_operand:
                output.append(token)
            elif token.name == OPEN_PAREN and token.type == TokenType.PAREN:
                stack.append(token)
            elif token.name == CLOSE_PAREN and token.type == TokenType.PAREN:
                while stack:
                    top = stack.pop()
                    if top.name == OPEN_PAREN:
                        break
                    output.append(top)
                else:
                    if strict:
                        raise ParseError("unbalanced parentheses: unexpected ')'")
                    logger.debug("Unmatched ')' ignored")
            elif token.is_callable and token.name in PRECEDENCE:
                token_prec = PRECEDENCE[token.name]
                # >= 使同级操作符左结合
                while stack and PRECEDENCE[stack[-1].name] >= token_prec:
                    output.append(stack.pop())
                stack.append(token)
            else:
                raise ParseError(f"invalid operation or number: {token.name}")

        while stack:
            top = stack.pop()
            if strict and top.name == OPEN_PAREN:
                raise ParseError("unbalanced parentheses: missing ')'")
            output.append(top)

        return output


def infix_to_postfix(tokens, strict=False):
    return ShuntingYardConverter.infix_to_postfix(tokens, strict=strict)
