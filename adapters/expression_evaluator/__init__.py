from .stack_evaluator import StackExpressionEvaluator, bind, evaluate

__all__ = [
    "StackExpressionEvaluator",
    "bind",
    "evaluate",
]
