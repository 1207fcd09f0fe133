from selector_kit.expression.errors import ExpressionError
from selector_kit.expression.evaluator import build_selector, evaluate

__all__ = ["ExpressionError", "build_selector", "evaluate"]
