"""命令行入口 - 计算一个表达式并打印结果"""
import argparse
import logging
import sys

from config.config import CALCULATOR_CONFIG, CLI_CONFIG, CalculatorConfig, validate_config
from core import Calculator, CalculatorError

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog=CLI_CONFIG["prog"],
        usage=CLI_CONFIG["usage"],
        description="Evaluate an arithmetic expression. "
                    "Use '--' before expressions starting with '-'."
    )

    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate, e.g. 'sqrt(2^2 * 5 + 1)'"
    )
    parser.add_argument(
        "--angle_unit", "--angle-unit",
        type=str,
        choices=["degree", "radian"],
        default=CALCULATOR_CONFIG["angle_unit"],
        help="Angle unit for sin/cos/tg/ctg (default: radian)"
    )
    parser.add_argument(
        "--strict_parentheses",
        action="store_true",
        help="Reject unbalanced parentheses while parsing"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log tokens and postfix form"
    )
    return parser


def main(args):
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=CLI_CONFIG["log_format"]
    )

    if not args.expression:
        print("no argument provided")
        print(f"usage: {CLI_CONFIG['usage']}")
        return CLI_CONFIG["exit_success"]

    config = validate_config(CalculatorConfig(
        angle_unit=args.angle_unit,
        strict_parentheses=args.strict_parentheses
    ))
    expression = " ".join(args.expression)
    logger.debug(f"Calculating {expression!r} with {config}")

    try:
        result = Calculator(config).calculate(expression)
    except CalculatorError as e:
        print(f"Error: {e}")
        return CLI_CONFIG["exit_failure"]

    print(result)
    return CLI_CONFIG["exit_success"]


def cli(argv=None):
    return main(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(cli())
