"""配置文件"""
import logging
from collections import namedtuple
from enum import Enum

logger = logging.getLogger(__name__)


class AngleUnit(Enum):
    DEGREE = "degree"
    RADIAN = "radian"

    @classmethod
    def parse(cls, text):
        """接受 degree/degrees/deg 与 radian/radians/rad，大小写不敏感"""
        if isinstance(text, cls):
            return text
        normalized = str(text).strip().lower()
        for unit, aliases in _ANGLE_UNIT_ALIASES.items():
            if normalized in aliases:
                return unit
        raise ValueError(f"angle unit must be either 'degree' or 'radian', got {text!r}")


_ANGLE_UNIT_ALIASES = {
    AngleUnit.DEGREE: ("degree", "degrees", "deg"),
    AngleUnit.RADIAN: ("radian", "radians", "rad"),
}

# 计算器默认参数
CALCULATOR_CONFIG = {
    "angle_unit": "radian",
    "strict_parentheses": False,  # True 时括号不匹配直接报解析错误
}

# 命令行参数
CLI_CONFIG = {
    "prog": "calculate",
    "usage": "calculate [--angle_unit degree|radian] [your expression]",
    "exit_success": 0,
    "exit_failure": 1,
    "log_format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


class CalculatorConfig(namedtuple('CalculatorConfig', ['angle_unit', 'strict_parentheses'])):
    """单次计算的不可变配置，按调用传递，不存全局状态"""
    __slots__ = ()

    def __new__(cls, angle_unit=CALCULATOR_CONFIG["angle_unit"],
                strict_parentheses=CALCULATOR_CONFIG["strict_parentheses"]):
        return super().__new__(cls, AngleUnit.parse(angle_unit), bool(strict_parentheses))

    @classmethod
    def from_dict(cls, overrides=None):
        """在 CALCULATOR_CONFIG 之上合并覆盖项"""
        options = dict(CALCULATOR_CONFIG)
        if overrides:
            unknown = set(overrides) - set(options)
            if unknown:
                raise ValueError(f"Unknown calculator options: {sorted(unknown)}")
            options.update(overrides)
        return cls(**options)


# 验证配置
def validate_config(config=None):
    """验证配置的合理性"""
    if config is None:
        config = CalculatorConfig.from_dict()
    if not isinstance(config, CalculatorConfig):
        raise ValueError(f"Expected CalculatorConfig, got {type(config).__name__}")
    if not isinstance(config.angle_unit, AngleUnit):
        raise ValueError(f"Invalid angle unit: {config.angle_unit!r}")
    if CLI_CONFIG["exit_success"] == CLI_CONFIG["exit_failure"]:
        raise ValueError("Success and failure exit codes must differ")
    logger.debug(f"Configuration validated: {config}")
    return config
