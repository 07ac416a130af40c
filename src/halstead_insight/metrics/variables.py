"""Declared vs. referenced variable names.

A declared name counts as "live" when an identifier with that name appears
anywhere in the file, the declaration itself included. This is a coarse
declared-and-used measure; no control-flow or data-flow analysis is done.
"""

from typing import Any

from ..scanning.syntax import node_text, walk
from .models import VariableUsage


def variable_usage(tree: Any) -> VariableUsage:
    """Collect declarator-bound names and all identifier names."""
    declared: set[str] = set()
    referenced: set[str] = set()

    for node in walk(tree.root_node):
        if node.type == "variable_declarator":
            # Destructuring patterns bind several names; only plain ones count
            name = node.child_by_field_name("name")
            if name is not None and name.type == "identifier":
                declared.add(node_text(name))
        elif node.type == "identifier":
            referenced.add(node_text(node))

    return VariableUsage(declared=frozenset(declared), referenced=frozenset(referenced))
