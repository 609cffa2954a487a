import datetime
import random

import pytest

from tests.tools import SOLUTION_4X4, SOLUTION_9X9, copy_values


# Get the result of each test
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


# Print start and end of each test
@pytest.fixture(autouse=True)
def log_test_lifecycle(request):
    node_id = request.node.nodeid
    start_time = datetime.datetime.now().strftime("%H:%M:%S")

    print(f"\n[START] {start_time} - Running: {node_id}")

    yield

    end_time = datetime.datetime.now().strftime("%H:%M:%S")
    report = getattr(request.node, "rep_call", None)
    status = report.outcome.upper() if report else "UNKNOWN"

    print(f"\n[END] {end_time} - Result: {status} - {node_id}")


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def solution_4x4():
    return copy_values(SOLUTION_4X4)


@pytest.fixture
def solution_9x9():
    return copy_values(SOLUTION_9X9)
