"""Decision-point counting.

Only if/for/while statements, ternaries and short-circuit && / || add a path.
switch cases, catch clauses, do-while and for-in/of loops are not counted.
"""

from typing import Any

from ..scanning.syntax import walk

DECISION_NODES = frozenset({"if_statement", "for_statement", "while_statement", "ternary_expression"})

SHORT_CIRCUIT_OPERATORS = frozenset({"&&", "||"})


def cyclomatic_complexity(tree: Any) -> int:
    """1 + number of decision points in the tree."""
    complexity = 1
    for node in walk(tree.root_node):
        if node.type in DECISION_NODES:
            complexity += 1
        elif node.type == "binary_expression":
            op = node.child_by_field_name("operator")
            if op is not None and op.type in SHORT_CIRCUIT_OPERATORS:
                complexity += 1
    return complexity
