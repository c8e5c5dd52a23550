import sys
import logging
import io
import datetime
import pathlib
import pytest
if sys.version_info < (3, 8):
    pytest.exit("Python >= 3.8 is required to run tests. Current version: {}".format(sys.version.replace("\n", " ")))


LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport (with .outcome) to the item so fixtures can see the
    # outcome in teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Capture spikeguard logging for each test into an in-memory buffer and
    write it to a file only when the test fails.
    """
    pkg_logger = logging.getLogger("spikeguard")
    prev_level = pkg_logger.level
    prev_propagate = pkg_logger.propagate
    prev_handlers = list(pkg_logger.handlers)

    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG)

    try:
        yield
    finally:
        pkg_logger.removeHandler(handler)
        # tests may call configure_logging(); put the logger back as it was
        for h in list(pkg_logger.handlers):
            if h not in prev_handlers:
                pkg_logger.removeHandler(h)
        for h in prev_handlers:
            if h not in pkg_logger.handlers:
                pkg_logger.addHandler(h)
        pkg_logger.setLevel(prev_level)
        pkg_logger.propagate = prev_propagate

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and getattr(rep, "outcome", None) == "failed":
            LOG_DIR.mkdir(exist_ok=True)
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            fname = LOG_DIR / ("{}__{}.log".format(nodeid, ts))
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n".format(request.node.nodeid))
                f.write("=== Timestamp: {}\n\n".format(ts))
                f.write(buf.getvalue())
