# statement_model.py
from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class SimpleStatement:
    """Straight-line statement: opaque code text plus its source line."""
    code: str
    line: int = 0


@dataclass(frozen=True)
class ConditionalStatement:
    """Two-way branch. ``else_branch`` is None when there is no else clause."""
    condition: str
    then_branch: Tuple["Statement", ...] = ()
    else_branch: Optional[Tuple["Statement", ...]] = None
    line: int = 0


Statement = Union[SimpleStatement, ConditionalStatement]


@dataclass(frozen=True)
class Function:
    name: str
    body: Tuple[Statement, ...] = ()


def max_nesting_depth(statements, current=0):
    """Deepest conditional nesting below ``statements``."""
    depth = current
    for stmt in statements:
        if isinstance(stmt, ConditionalStatement):
            depth = max(depth, max_nesting_depth(stmt.then_branch, current + 1))
            depth = max(depth, max_nesting_depth(stmt.else_branch or (), current + 1))
    return depth


def count_statements(statements):
    """Return (simple statements, conditionals) found anywhere below ``statements``."""
    simple = conditionals = 0
    for stmt in statements:
        if isinstance(stmt, ConditionalStatement):
            conditionals += 1
            for branch in (stmt.then_branch, stmt.else_branch or ()):
                s, c = count_statements(branch)
                simple += s
                conditionals += c
        else:
            simple += 1
    return simple, conditionals
