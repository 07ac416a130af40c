"""Call-graph construction and fan-in/fan-out information flow.

Calls are attributed to the lexically enclosing function: a scope stack is
pushed when the walk enters a function and popped when it leaves, so calls
made after a nested function literal still belong to the outer function.
Calls outside any function belong to the GLOBAL pseudo-function.
"""

from __future__ import annotations

from typing import Any, Optional

from ..scanning.syntax import ENTER, field_text, node_text, walk_events
from .models import GLOBAL_SCOPE, FunctionNode, InformationFlow

# "function" is the pre-0.21 tree-sitter-javascript name of function_expression
NAMED_FUNCTION_NODES = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "function_expression",
        "function",
        "generator_function",
    }
)

FUNCTION_NODES = NAMED_FUNCTION_NODES | {"arrow_function", "method_definition"}


def function_name(node: Any) -> str:
    """Identity of a function node.

    Anonymous functions are named after their source offset so that two of
    them never collide within one file. The names are only stable for the
    same source text.
    """
    if node.type == "arrow_function":
        return f"arrow@{node.start_byte}"
    name: Optional[str] = field_text(node, "name")
    if name:
        return name
    if node.type == "method_definition":
        return f"method@{node.start_byte}"
    return f"anonymous@{node.start_byte}"


def callee_name(node: Any) -> Optional[str]:
    """Name of a plainly referenced callee; None for member/computed calls."""
    callee = node.child_by_field_name("function")
    if callee is None or callee.type != "identifier":
        return None
    return node_text(callee)


class CallGraphBuilder:
    """Builds the per-file function graph during a single walk."""

    def __init__(self) -> None:
        self.functions: dict[str, FunctionNode] = {}
        self._scopes: list[str] = [GLOBAL_SCOPE]
        self._register(GLOBAL_SCOPE)

    @property
    def current_scope(self) -> str:
        return self._scopes[-1]

    def _register(self, name: str) -> FunctionNode:
        node = self.functions.get(name)
        if node is None:
            node = self.functions[name] = FunctionNode(name)
        return node

    def enter_function(self, name: str) -> None:
        self._register(name)
        self._scopes.append(name)

    def exit_function(self) -> None:
        self._scopes.pop()

    def record_call(self, callee: str) -> None:
        target = self._register(callee)
        caller = self.functions[self.current_scope]
        caller.fan_out.add(callee)
        target.fan_in.add(caller.name)

    def build(self, root: Any) -> InformationFlow:
        for event, node in walk_events(root):
            kind = node.type
            if kind in FUNCTION_NODES and node.is_named:
                if event == ENTER:
                    self.enter_function(function_name(node))
                else:
                    self.exit_function()
            elif kind == "call_expression" and event == ENTER:
                name = callee_name(node)
                if name is not None:
                    self.record_call(name)
        return InformationFlow(functions=self.functions)


def information_flow(tree: Any) -> InformationFlow:
    """Fan-in/fan-out graph and information-flow summary of one file."""
    return CallGraphBuilder().build(tree.root_node)
