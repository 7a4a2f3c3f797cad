# cfg_builder.py
import logging

import networkx as nx

from cfg_model import FALSE_LABEL, TRUE_LABEL, MergePolicy, NodeKind
from cfg_normalizer import normalize
from statement_model import ConditionalStatement, Function, SimpleStatement

logger = logging.getLogger(__name__)


class CFGBuilder:
    """Builds the control-flow graph of a single function.

    One instance per function: the working graph and the id counter are
    discarded once ``build`` hands back the finished graph.
    """

    def __init__(self):
        self.graph = nx.MultiDiGraph()
        self.counter = 0
        self.edge_count = 0

    def _new_node(self, kind, label):
        """Create node with the next sequential id"""
        node_id = self.counter
        self.counter += 1
        self.graph.add_node(node_id, kind=kind, label=label)
        return node_id

    def _add_edge(self, source, target, label=None):
        self.graph.add_edge(source, target, label=label, seq=self.edge_count)
        self.edge_count += 1

    def build(self, function: Function, merge_policy=MergePolicy.CONTRACT):
        """Entry point: build CFG for a function"""
        entry = self._new_node(NodeKind.ENTRY, f"START: {function.name}")
        exit_ = self._new_node(NodeKind.EXIT, f"END: {function.name}")
        self._build_sequence(function.body, entry, exit_)
        logger.debug(
            "raw CFG for %s: %d nodes, %d edges",
            function.name, self.graph.number_of_nodes(), self.graph.number_of_edges(),
        )
        return normalize(self.graph, entry, exit_, policy=merge_policy, name=function.name)

    def _build_sequence(self, statements, pred, exit_target, label=None):
        """Wire ``statements`` between ``pred`` and ``exit_target``.

        ``label`` goes on the first edge created (the edge into the first
        node, or the direct edge to ``exit_target`` when there are no
        statements) and on no other.
        """
        if not statements:
            self._add_edge(pred, exit_target, label)
            return

        last = len(statements) - 1
        for index, stmt in enumerate(statements):
            if isinstance(stmt, SimpleStatement):
                node_id = self._new_node(NodeKind.SIMPLE, stmt.code)
                self._add_edge(pred, node_id, label)
                if index == last:
                    self._add_edge(node_id, exit_target)
                pred = node_id

            elif isinstance(stmt, ConditionalStatement):
                cond_id = self._new_node(NodeKind.CONDITION, stmt.condition)
                self._add_edge(pred, cond_id, label)

                # join point; only needed when code follows the conditional
                if index == last:
                    merge_id = exit_target
                else:
                    merge_id = self._new_node(NodeKind.SIMPLE, "")

                self._build_sequence(stmt.then_branch, cond_id, merge_id, TRUE_LABEL)
                self._build_sequence(stmt.else_branch or (), cond_id, merge_id, FALSE_LABEL)
                pred = merge_id

            else:
                raise TypeError(f"unsupported statement: {stmt!r}")

            label = None


def build_cfg(function: Function, merge_policy=MergePolicy.CONTRACT):
    builder = CFGBuilder()
    return builder.build(function, merge_policy)
