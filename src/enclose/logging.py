"""
Logging setup for enclose.

The library only logs at DEBUG level and installs a ``NullHandler`` on its
root logger, so nothing is printed unless the application configures logging,
either directly or through :func:`config_logging` and
:func:`set_up_simple_logging`.
"""
import logging
import warnings
from pathlib import Path
from shutil import move

LOGGER_ID = "enclose"
LOG_FORMAT = "%(asctime)-24s|%(levelname)-9s|%(name)-30s|%(message)s"
enclose_logger = logging.getLogger(LOGGER_ID)
geometry_logger = logging.getLogger("{}.geometry".format(LOGGER_ID))
session_logger = logging.getLogger("{}.session".format(LOGGER_ID))
enclose_handlers = list()

enclose_logger.addHandler(logging.NullHandler())


def config_logging(handlers, replace=True, level=logging.DEBUG,
                   redirect_warnings=True):
    """
    Function to configure logging.

    Args:
        handlers (list of logging.Handler): already configured handlers.
        replace (bool, optional): whether to replace the handlers installed
            by a previous call or to add to them. Defaults to True.
        level (int, optional): log level of the enclose logger. Defaults to
            ``logging.DEBUG``.
        redirect_warnings (bool, optional): whether to redirect warnings to
            the logger. Beware that this modifies the warnings settings.
    """
    global enclose_handlers
    root_logger = logging.getLogger()
    if replace and enclose_handlers:
        for h in enclose_handlers:
            root_logger.removeHandler(h)
    for h in handlers:
        root_logger.addHandler(h)
    enclose_handlers = list(handlers)

    enclose_logger.setLevel(level)

    if redirect_warnings:
        logging.captureWarnings(True)
        warn_log = logging.getLogger("py.warnings")
        warnings.simplefilter("once")
        for h in handlers:
            warn_log.addHandler(h)
    enclose_logger.info("Started enclose logging.")
    for h in handlers:
        if isinstance(h, logging.FileHandler):
            enclose_logger.info("Logging to file: %s.", h.baseFilename)


def set_up_simple_logging(log_file=None, redirect_warnings=True,
                          level=logging.INFO):
    """
    Sets up logging to ``sys.stderr`` and optionally to a given file.

    Existing log files are moved to ``<log_file>.1``. For low-level control
    over the logging system use :func:`config_logging`.

    Args:
        log_file (str, optional): log filename.
        redirect_warnings (bool, optional): whether to redirect warnings to
            the logger.
        level (int, optional): log level of the created handlers. Defaults
            to ``logging.INFO``.
    """
    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter(LOG_FORMAT))
    handlers = [sh]
    moved_log = False
    fh = None
    if log_file:
        if Path(log_file).exists():
            move(log_file, "{}.1".format(log_file))
            moved_log = True
        fh = logging.FileHandler(log_file, "w", "utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        fh.setLevel(level)
        handlers.append(fh)
    config_logging(handlers, level=level, redirect_warnings=redirect_warnings)
    if moved_log and fh is not None:
        enclose_logger.info("Moved old log file to '%s.1'.", fh.baseFilename)
