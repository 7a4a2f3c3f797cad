"""
C extraction with tree-sitter
"""

import logging
import textwrap

from c_parser import parse_c_code
from statement_model import ConditionalStatement, SimpleStatement


def _parse(source):
    return parse_c_code(textwrap.dedent(source).lstrip("\n"))


def test_if_else_function(max_source):
    functions = _parse(max_source)

    assert len(functions) == 1
    fn = functions[0]
    assert fn.name == "max"
    assert fn.body == (
        ConditionalStatement(
            condition="a > b",
            then_branch=(SimpleStatement("return a;", 3),),
            else_branch=(SimpleStatement("return b;", 5),),
            line=2,
        ),
    )


def test_sequential_statements():
    (fn,) = _parse(
        """
        void process() {
            int x = 10;
            x = x + 1;
            printf("%d\\n", x);
        }
        """
    )

    assert [stmt.code for stmt in fn.body] == ["int x = 10;", "x = x + 1;", 'printf("%d\\n", x);']
    assert [stmt.line for stmt in fn.body] == [2, 3, 4]


def test_missing_else_is_none_and_empty_else_is_empty():
    (fn,) = _parse(
        """
        void f(int a) {
            if (a) { g(); }
            if (a) { g(); } else { }
        }
        """
    )

    first, second = fn.body
    assert first.else_branch is None
    assert second.else_branch == ()


def test_else_if_becomes_nested_conditional():
    (fn,) = _parse(
        """
        int sign(int x) {
            if (x < 0) {
                return -1;
            } else if (x == 0) {
                return 0;
            } else {
                return 1;
            }
        }
        """
    )

    (outer,) = fn.body
    (inner,) = outer.else_branch
    assert isinstance(inner, ConditionalStatement)
    assert inner.condition == "x == 0"
    assert inner.then_branch == (SimpleStatement("return 0;", 5),)
    assert inner.else_branch == (SimpleStatement("return 1;", 7),)


def test_unbraced_branches():
    (fn,) = _parse(
        """
        int f(int a) {
            if (a) a = 1; else a = 2;
            return a;
        }
        """
    )

    cond, ret = fn.body
    assert cond.then_branch == (SimpleStatement("a = 1;", 2),)
    assert cond.else_branch == (SimpleStatement("a = 2;", 2),)
    assert ret == SimpleStatement("return a;", 3)


def test_nested_blocks_are_flattened_and_loops_skipped():
    (fn,) = _parse(
        """
        void f(int n) {
            int i = 0;
            {
                i = 1;
            }
            while (n > 0) {
                n--;
            }
            for (i = 0; i < n; i++) { }
            done();
        }
        """
    )

    assert [stmt.code for stmt in fn.body] == ["int i = 0;", "i = 1;", "done();"]


def test_function_names_and_order():
    functions = _parse(
        """
        int proto(void);

        static char *name(void) {
            return 0;
        }

        void empty(void) {
        }
        """
    )

    assert [fn.name for fn in functions] == ["name", "empty"]
    assert functions[1].body == ()


def test_unbraced_loop_branches_are_skipped():
    (fn,) = _parse(
        """
        void f(int n) {
            if (n) while (n > 0) n--; else for (;;) { }
            if (n) switch (n) { default: n = 0; }
        }
        """
    )

    loop_if, switch_if = fn.body
    assert loop_if.then_branch == ()
    assert loop_if.else_branch == ()
    assert switch_if.then_branch == ()
    assert switch_if.else_branch is None


def test_syntax_errors_are_logged_and_extraction_continues(caplog):
    with caplog.at_level(logging.WARNING, logger="c_parser"):
        functions = _parse(
            """
            int ok(void) {
                return 1;
            }

            void broken(int a) {
                if (a { g(); }
            }
            """
        )

    assert "syntax errors" in caplog.text
    assert functions[0].name == "ok"
    assert functions[0].body == (SimpleStatement("return 1;", 2),)
