from .metrics import RunEvaluator
from .visualization import Visualizer

__all__ = ["RunEvaluator", "Visualizer"]
