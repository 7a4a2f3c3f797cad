"""
Statement-building helpers for tests.
"""

from statement_model import ConditionalStatement, Function, SimpleStatement


def s(code, line=0):
    return SimpleStatement(code, line)


def if_(condition, then=(), orelse=None, line=0):
    return ConditionalStatement(
        condition=condition,
        then_branch=tuple(then),
        else_branch=tuple(orelse) if orelse is not None else None,
        line=line,
    )


def func(name, *body):
    return Function(name=name, body=tuple(body))


def edge_set(cfg):
    """Edges as {(source label, target label, edge label)}"""
    return {(cfg.node(e.source).label, cfg.node(e.target).label, e.label) for e in cfg.edges}


def out_labels(cfg, node_id):
    return sorted(e.label or "" for e in cfg.successors(node_id))
