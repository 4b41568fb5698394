import sys

import pytest


@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session, exitstatus):
    # pytest removes its temp dirs at session finish; on Python < 3.12
    # shutil.rmtree recurses per directory level and would overflow on the
    # deeply nested tree built by test_deeply_nested_tree. Only raised after
    # all tests have run, so the code under test still sees the default limit.
    sys.setrecursionlimit(max(sys.getrecursionlimit(), 10000))
