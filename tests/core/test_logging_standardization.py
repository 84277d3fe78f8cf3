import importlib
import logging


def test_logging_configured():
    logging.basicConfig(level=logging.WARNING, force=True)
    import astar_grid.main as main
    importlib.reload(main)
    assert logging.getLogger().getEffectiveLevel() == logging.INFO
    assert logging.getLogger("astar_grid.search.engine").level == logging.WARNING
