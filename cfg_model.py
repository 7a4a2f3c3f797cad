# cfg_model.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import networkx as nx

TRUE_LABEL = "true"
FALSE_LABEL = "false"


class NodeKind(str, Enum):
    ENTRY = "entry"
    EXIT = "exit"
    SIMPLE = "simple"
    CONDITION = "condition"


class MergePolicy(str, Enum):
    """How normalization treats edges that pass through a placeholder merge node."""
    CONTRACT = "contract"  # reattach incoming edges to the placeholder's successor
    DROP = "drop"          # discard every edge touching a placeholder


@dataclass(frozen=True)
class CFGNode:
    id: int
    kind: NodeKind
    label: str


@dataclass(frozen=True)
class CFGEdge:
    source: int
    target: int
    label: Optional[str] = None  # "true", "false" or None


@dataclass(frozen=True)
class ControlFlowGraph:
    """Finished control-flow graph of one function. Read-only once built."""
    name: str
    nodes: Tuple[CFGNode, ...]
    edges: Tuple[CFGEdge, ...]
    entry_id: int
    exit_id: int

    def node(self, node_id: int) -> CFGNode:
        return self.nodes[node_id]

    def successors(self, node_id: int):
        return [e for e in self.edges if e.source == node_id]

    def predecessors(self, node_id: int):
        return [e for e in self.edges if e.target == node_id]

    def find(self, label: str) -> Optional[CFGNode]:
        """First node carrying ``label``, or None."""
        for n in self.nodes:
            if n.label == label:
                return n
        return None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "entry": self.entry_id,
            "exit": self.exit_id,
            "nodes": [{"id": n.id, "kind": n.kind.value, "label": n.label} for n in self.nodes],
            "edges": [{"from": e.source, "to": e.target, "label": e.label} for e in self.edges],
        }

    def to_networkx(self) -> nx.MultiDiGraph:
        graph = nx.MultiDiGraph(name=self.name)
        for n in self.nodes:
            graph.add_node(n.id, kind=n.kind, label=n.label)
        for seq, e in enumerate(self.edges):
            graph.add_edge(e.source, e.target, label=e.label, seq=seq)
        return graph
