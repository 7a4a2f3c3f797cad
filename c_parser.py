# c_parser.py
"""
C source -> statement model, via tree-sitter.

Only the shapes the flowchart understands are extracted: straight-line
statements and if/else. Loops, switch, goto and the like are skipped.
"""
import logging
from typing import List, Optional

import tree_sitter_c
from tree_sitter import Language, Node, Parser

from statement_model import ConditionalStatement, Function, SimpleStatement

logger = logging.getLogger(__name__)

SIMPLE_KINDS = ("expression_statement", "declaration", "return_statement")

_c_parser = None


def get_c_parser() -> Parser:
    """Get or create the C parser."""
    global _c_parser
    if _c_parser is None:
        _c_parser = Parser(Language(tree_sitter_c.language()))
    return _c_parser


def _text(node: Node) -> str:
    return node.text.decode("utf-8")


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def parse_c_code(source: str) -> List[Function]:
    """Extract every top-level function definition from C source, in order."""
    tree = get_c_parser().parse(source.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        logger.warning("C source contains syntax errors; extraction may be partial")

    functions = []
    for child in root.children:
        if child.type == "function_definition":
            func = parse_function(child)
            if func is not None:
                functions.append(func)
    return functions


def parse_function(node: Node) -> Optional[Function]:
    name = get_function_name(node)
    body = node.child_by_field_name("body")
    if name is None or body is None:
        return None
    return Function(name=name, body=tuple(parse_compound_statement(body)))


def get_function_name(node: Node) -> Optional[str]:
    declarator = node.child_by_field_name("declarator")
    if declarator is None:
        return None
    ident = _find_identifier(declarator)
    return _text(ident) if ident is not None else None


def _find_identifier(node: Node) -> Optional[Node]:
    if node.type == "identifier":
        return node
    for child in node.children:
        found = _find_identifier(child)
        if found is not None:
            return found
    return None


def parse_compound_statement(node: Node) -> list:
    statements = []
    for child in node.children:
        if child.type == "if_statement":
            statements.append(parse_if_statement(child))
        elif child.type in SIMPLE_KINDS:
            statements.append(SimpleStatement(_text(child).strip(), _line(child)))
        elif child.type == "compound_statement":
            # bare nested block
            statements.extend(parse_compound_statement(child))
        elif child.is_named and child.type != "comment":
            logger.debug("skipping %s at line %d", child.type, _line(child))
    return statements


def _parse_branch(node: Node) -> list:
    """Body of a then/else arm, braced or not."""
    if node.type == "compound_statement":
        return parse_compound_statement(node)
    if node.type == "if_statement":
        return [parse_if_statement(node)]
    if node.type in SIMPLE_KINDS:
        return [SimpleStatement(_text(node).strip(), _line(node))]
    logger.debug("skipping %s at line %d", node.type, _line(node))
    return []


def _condition_text(node: Node) -> str:
    if node.type == "parenthesized_expression" and node.child_count >= 3:
        # drop the surrounding parentheses
        return _text(node.children[1])
    return _text(node)


def parse_if_statement(node: Node) -> ConditionalStatement:
    condition = _condition_text(node.child_by_field_name("condition"))

    consequence = node.child_by_field_name("consequence")
    then_branch = _parse_branch(consequence) if consequence is not None else []

    else_branch = None
    alternative = node.child_by_field_name("alternative")
    if alternative is not None:
        if alternative.type == "else_clause":
            arms = [c for c in alternative.named_children if c.type != "comment"]
            else_branch = _parse_branch(arms[0]) if arms else []
        else:
            else_branch = _parse_branch(alternative)

    return ConditionalStatement(
        condition=condition,
        then_branch=tuple(then_branch),
        else_branch=tuple(else_branch) if else_branch is not None else None,
        line=_line(node),
    )
