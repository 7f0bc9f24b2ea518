import importlib
import logging


def test_logging_configured():
    logging.basicConfig(level=logging.WARNING, force=True)
    import grid_nav.main as main
    importlib.reload(main)
    assert logging.getLogger().getEffectiveLevel() == logging.INFO
    assert (
        logging.getLogger("grid_nav.systems.movement.pathfinding").level
        == logging.WARNING
    )


def test_invalid_module_level_is_reported(caplog):
    from grid_nav.config import LoggingConfig
    from grid_nav.main import configure_logging

    # basicConfig(force=True) drops root handlers, so listen on the module logger.
    main_logger = logging.getLogger("grid_nav.main")
    main_logger.addHandler(caplog.handler)
    try:
        configure_logging(LoggingConfig(module_levels={"grid_nav.demo": "LOUD"}))
    finally:
        main_logger.removeHandler(caplog.handler)
    assert "Invalid log level 'LOUD'" in caplog.text
