# metrics_calculator.py
from cfg_model import NodeKind
from statement_model import count_statements, max_nesting_depth


def calculate_metrics(function, cfg):
    """Per-function flowchart metrics, keyed the way the UI tables expect."""
    simple, conditionals = count_statements(function.body)
    decisions = sum(1 for n in cfg.nodes if n.kind is NodeKind.CONDITION)
    lines = [s.line for s in function.body if s.line]

    return {
        "cyclomatic_complexity": decisions + 1,
        "nesting_depth": max_nesting_depth(function.body),
        "statements": simple,
        "decisions": conditionals,
        "nodes": len(cfg.nodes),
        "edges": len(cfg.edges),
        "start_line": min(lines) if lines else None,
    }


def calculate_all(pairs):
    """Metrics for every (function, cfg) pair, in order.

    Keyed by function name; a repeated name gets a "#2", "#3" ... suffix so
    every definition keeps its own row.
    """
    metrics = {}
    seen = {}
    for function, cfg in pairs:
        seen[function.name] = seen.get(function.name, 0) + 1
        key = function.name if seen[function.name] == 1 else f"{function.name}#{seen[function.name]}"
        metrics[key] = calculate_metrics(function, cfg)
    return metrics
