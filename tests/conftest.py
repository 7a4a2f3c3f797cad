"""
Shared fixtures
"""

import pytest

from helpers import func, if_, s


@pytest.fixture
def max_function():
    return func("f", if_("a > b", [s("return a")], [s("return b")]))


@pytest.fixture
def straight_function():
    return func("g", s("declare"), s("assign"), s("call"))


@pytest.fixture
def trailing_if_function():
    return func("h", if_("cond", [s("s1")]), s("s2"))


@pytest.fixture
def max_source():
    return """
        int max(int a, int b) {
            if (a > b) {
                return a;
            } else {
                return b;
            }
        }
    """
