from datetime import datetime
from pathlib import Path
from typing import Optional, Union
import logging
import re

from coloredlogs import ColoredFormatter
from shortlist import validation


LOGGER = logging.getLogger(__name__)


class BlockingFilter(logging.Filter):
    def __init__(self, name, level, msg=None):
        """
        Blocks all messages for the given name (and children) at the specified or lower level. If msg is specified, it is interpreted as a regular expression. Records will further need to have messages matching the regex msg to be blocked.

        Usage:

        .. code-block::

            # Silence the per-container debug messages.
            handler.addFilter(BlockingFilter('shortlist.shortlist', 'DEBUG'))
        """
        super().__init__()
        self.blocked_name = name.split(".")
        self.level = getattr(logging, level) if isinstance(level, str) else level
        self.msg = None if msg is None else re.compile(msg)

    def filter(self, record):
        if (
            record.name.split(".")[: len(self.blocked_name)] == self.blocked_name
            and record.levelno <= self.level
            and (self.msg is None or len(re.findall(self.msg, record.getMessage())) > 0)
        ):
            return 0
        #
        return 1


@validation.choices(
    "level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], doc=False
)
def configure_logging_handler(
    level: str = "ERROR",
    log_filter: Optional[logging.Filter] = None,
    filename: Optional[Union[str, Path]] = None,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    name: Optional[str] = "shortlist",
):
    """
    Appends a handler to the specified logger (the ``shortlist`` package logger by default). If a filename is specified, this handler will write to that file. Otherwise, it will write to the console using colored output.

    .. note::

      The level will only be in effect if it is higher than or equal to the level of the configured logger. E.g., to see the debug messages of the shortlist containers:

      .. code-block::

        import logging
        logging.getLogger('shortlist').setLevel('DEBUG')
        configure_logging_handler('DEBUG')

    :param level: Minimum level logged by the created handler.
    :param log_filter: An optional filter, e.g., :class:`BlockingFilter`.
    :param filename: If specified, a file handler is created instead of a console handler. If this is a filename, it is used directly as the log output. If a directory, a default filename is created within that directory using the current time (in the ``datefmt`` format) as the name.
    :param fmt: :class:`logging.Formatter` ``fmt`` parameter.
    :param datefmt: :class:`logging.Formatter` ``datefmt`` parameter.
    :param name: The name of the logger to configure.

    :return: The created handler.
    """

    fmt = (
        fmt
        or "%(levelname)-8s %(asctime)-23s %(name)s:%(lineno)d(%(threadName)s) %(message)s"
    )
    datefmt = datefmt or "%Y-%m-%d %H:%M:%S"

    # Colors only on the console.
    _Formatter = logging.Formatter if filename is not None else ColoredFormatter
    formatter = _Formatter(fmt=fmt, datefmt=datefmt)

    # Get default filename
    if filename and (filename := Path(filename)).is_dir():
        filename = filename / (datetime.now().strftime(datefmt) + ".log")

    # Build handler
    if filename is not None:
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler()
    handler.setLevel(level)
    if log_filter:
        handler.addFilter(log_filter)
    handler.setFormatter(formatter)

    logging.getLogger(name).addHandler(handler)

    return handler
