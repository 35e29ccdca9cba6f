import pytest
import logging

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 6

def pytest_addoption(parser):
    """
    Adds cli arguments to the pytest command
    """
    parser.addoption(
        "--max-size", type=int, action="store", default=DEFAULT_MAX_SIZE,
        help="Largest board dimension used by the tests that sweep over board sizes (default: %(default)s). "
             "The BDD of large boards grows quickly, and so does the time to build it."
    )

@pytest.fixture
def board_size(request):
    """
    Board dimension for tests that sweep over sizes.

    Tests requesting this fixture are run for every size from 1 up to `--max-size`,
    see `pytest_generate_tests`.
    """
    if not hasattr(request, "param"):
        raise RuntimeError("The 'board_size' fixture must be parametrized via pytest_generate_tests")
    return request.param

def pytest_configure(config):
    # Configure logging for test filtering information
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )
    max_size = config.getoption("--max-size")
    if max_size < 1:
        raise pytest.UsageError(f"--max-size must be at least 1, got {max_size}")
    logger.info(f"Sweeping board sizes 1..{max_size}")

def pytest_generate_tests(metafunc):
    """
    Parametrize every test that uses the 'board_size' fixture with sizes 1..--max-size
    """
    if "board_size" not in metafunc.fixturenames:
        return
    max_size = metafunc.config.getoption("--max-size")
    metafunc.parametrize("board_size", list(range(1, max_size + 1)), indirect=True, ids=lambda n: f"N{n}")
