"""Evaluation engine module for flowgraph.

This module provides pure functions for evaluating node values. Evaluation
is lazy and memoized: a node's value is computed from its resolved inputs
only when requested, and every value computed on the way is cached.

Key types:
- evaluate_node: Pure function returning a node's value and the new cache
- NodeTrace: Input and output values seen by one node
- trace_evaluation: Evaluate a node and trace its upstream values
"""

from ._engine import evaluate_node
from ._trace import NodeTrace, trace_evaluation

__all__ = [
    "NodeTrace",
    "evaluate_node",
    "trace_evaluation",
]
