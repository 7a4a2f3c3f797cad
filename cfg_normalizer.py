# cfg_normalizer.py
import logging

from cfg_model import CFGEdge, CFGNode, ControlFlowGraph, MergePolicy, NodeKind

logger = logging.getLogger(__name__)


def _is_placeholder(data):
    return data["kind"] == NodeKind.SIMPLE and not data["label"]


def _ordered_edges(edges):
    """Edges sorted by creation order (``seq`` attribute)."""
    return sorted(edges, key=lambda e: e[2].get("seq", 0))


def _live_targets(graph, node, id_map, seen):
    """Surviving nodes reached from ``node`` by skipping over placeholders."""
    if node in id_map:
        return [node]
    if node in seen:
        return []
    seen.add(node)
    targets = []
    for _, succ, _ in _ordered_edges(graph.out_edges(node, data=True)):
        targets.extend(_live_targets(graph, succ, id_map, seen))
    return targets


def normalize(graph, entry_id, exit_id, policy=MergePolicy.CONTRACT, name=""):
    """Remove placeholder merge nodes and renumber the rest densely.

    ``graph`` is the builder's working ``MultiDiGraph``; nodes are visited in
    insertion order and edges in ``seq`` order, so the output keeps creation
    order. With ``MergePolicy.CONTRACT`` an edge into a placeholder is
    redirected to what the placeholder leads to, keeping the edge label.
    With ``MergePolicy.DROP`` it is discarded along with the placeholder.
    """
    policy = MergePolicy(policy)

    id_map = {}
    nodes = []
    for old_id, data in graph.nodes(data=True):
        if _is_placeholder(data):
            continue
        new_id = len(nodes)
        id_map[old_id] = new_id
        nodes.append(CFGNode(new_id, NodeKind(data["kind"]), data["label"]))

    edges = []
    for source, target, data in _ordered_edges(graph.edges(data=True)):
        if source not in id_map:
            # leaves a placeholder: folded into the edges entering it
            continue
        if target in id_map:
            targets = [target]
        elif policy is MergePolicy.CONTRACT:
            targets = _live_targets(graph, target, id_map, set())
        else:
            targets = []
        for t in targets:
            edges.append(CFGEdge(id_map[source], id_map[t], data.get("label")))

    dropped = graph.number_of_nodes() - len(nodes)
    if dropped:
        logger.debug("%s: removed %d placeholder node(s) (%s)", name, dropped, policy.value)

    return ControlFlowGraph(
        name=name,
        nodes=tuple(nodes),
        edges=tuple(edges),
        entry_id=id_map.get(entry_id, entry_id),
        exit_id=id_map.get(exit_id, exit_id),
    )
