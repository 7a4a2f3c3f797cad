# flowchart_generator.py
from cfg_model import ControlFlowGraph, NodeKind
from settings import OutputFormat

MERMAID_SPECIAL = set(';*()[]{},:"')


def escape_mermaid(label: str) -> str:
    """Flatten to one line; quote when the label has Mermaid punctuation."""
    cleaned = label.replace("\n", " ").replace("\r", "")
    if any(c in MERMAID_SPECIAL for c in cleaned):
        return '"' + cleaned.replace('"', "#quot;") + '"'
    return cleaned


def escape_dot(label: str) -> str:
    cleaned = label.replace("\r", "").replace("\\", "\\\\").replace('"', '\\"')
    return cleaned.replace("\n", "\\n")


def render_mermaid(cfg: ControlFlowGraph) -> str:
    lines = ["```mermaid", "flowchart TD"]

    for node in cfg.nodes:
        text = escape_mermaid(node.label)
        if node.kind in (NodeKind.ENTRY, NodeKind.EXIT):
            lines.append(f"    {node.id}([{text}])")
        elif node.kind is NodeKind.CONDITION:
            lines.append(f"    {node.id}{{{text}}}")
        elif node.label:
            lines.append(f"    {node.id}[{text}]")

    for edge in cfg.edges:
        if edge.label:
            lines.append(f"    {edge.source} -->|{edge.label}| {edge.target}")
        else:
            lines.append(f"    {edge.source} --> {edge.target}")

    lines.append("```")
    return "\n".join(lines) + "\n"


def render_dot(cfg: ControlFlowGraph) -> str:
    lines = [f'digraph "{escape_dot(cfg.name or "flow")}" {{', "  node [shape=box];"]

    for node in cfg.nodes:
        text = escape_dot(node.label)
        if node.kind in (NodeKind.ENTRY, NodeKind.EXIT):
            lines.append(f'  n{node.id} [label="{text}", shape=ellipse, style=filled, fillcolor=lightgray];')
        elif node.kind is NodeKind.CONDITION:
            lines.append(f'  n{node.id} [label="{text}", shape=diamond, style=filled, fillcolor=lightblue];')
        elif node.label:
            lines.append(f'  n{node.id} [label="{text}", shape=box];')

    for edge in cfg.edges:
        if edge.label:
            lines.append(f'  n{edge.source} -> n{edge.target} [label="{edge.label}"];')
        else:
            lines.append(f"  n{edge.source} -> n{edge.target};")

    lines.append("}")
    return "\n".join(lines) + "\n"


RENDERERS = {
    OutputFormat.MERMAID: render_mermaid,
    OutputFormat.DOT: render_dot,
}


def render(cfg: ControlFlowGraph, fmt=OutputFormat.MERMAID) -> str:
    return RENDERERS[OutputFormat(fmt)](cfg)


def render_document(cfgs, fmt=OutputFormat.MERMAID) -> str:
    """One document for a source file: each function's chart, blank-line separated."""
    return "".join(render(cfg, fmt) + "\n" for cfg in cfgs)
