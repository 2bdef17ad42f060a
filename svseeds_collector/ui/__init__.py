"""Terminal output for the collector."""

from .reporter import Reporter
from .reporter import StepMessages

__all__ = ["Reporter", "StepMessages"]
