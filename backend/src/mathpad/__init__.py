"""mathpad: expression evaluation backend for the notebook editor."""

from mathpad.evaluator import EvaluationResult, Failure, Success, evaluate_math_expression

__version__ = "0.1.0"

__all__ = ["EvaluationResult", "Failure", "Success", "evaluate_math_expression"]
