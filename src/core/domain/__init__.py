"""
Domain models and value objects.

Contains the policy and result models used at the evaluator boundary.
"""

from src.core.domain.outcome import EvaluationOutcome, EvaluationStatus
from src.core.domain.precision import PrecisionPolicy

__all__ = [
    # Precision policy
    "PrecisionPolicy",
    # Evaluation outcome
    "EvaluationOutcome",
    "EvaluationStatus",
]
