"""Core business logic layer.

Subpackages:
- planning: weekly recipe selection, composite recipes and the planner facade
- reporting: nutrition aggregation, weekly recommendations and text reports
"""
__all__ = ["planning", "reporting"]
