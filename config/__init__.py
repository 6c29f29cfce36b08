"""配置模块"""
from .config import AngleUnit, CalculatorConfig, CALCULATOR_CONFIG, CLI_CONFIG, validate_config

__all__ = ['AngleUnit', 'CalculatorConfig', 'CALCULATOR_CONFIG', 'CLI_CONFIG', 'validate_config']
