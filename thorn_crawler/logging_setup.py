"""
thorn_crawler.logging_setup
===========================
Shared ``thorn-crawler`` logger.

Messages start with a bracketed tag naming the step that produced them, so a
run log can be filtered with grep:

==============  ==========================================================
``[CRAWL]``     crawl start/finish, folder page being expanded
``[DIR]``       folder path resolved for a folder page
``[POST]``      post being processed, and where it is placed
``[TRAIL]``     last breadcrumb label read from a page
``[LINKS]``     number of entries found in a listing table
``[EXPORT]``    sequence number reserved for a document
``[SAVE]``      file written
``[SKIP]``      URL already visited in this crawl
``[DEPTH]``     folder not loaded because it is past ``max_depth``
``[BROWSER]``   browser lifecycle and forwarded page console output
``[ERR]``       node or export failure; the crawl carries on
==============  ==========================================================

Untagged lines are run settings and the end-of-run summary.
"""

import logging

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("thorn-crawler")


def setup_logging(debug: bool = False) -> None:
    """Attach a single (coloured when available) stream handler to ``log``."""
    level = logging.DEBUG if debug else logging.INFO
    log.setLevel(level)
    log.handlers.clear()

    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S"
        ))
    log.addHandler(handler)
