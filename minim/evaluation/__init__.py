from minim.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
