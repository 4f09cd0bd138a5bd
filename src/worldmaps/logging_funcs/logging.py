"""worldmaps.logging_funcs.logging.py

Standardised logging setup for worldmaps command line tools.

Example :

```
import sys
from worldmaps.logging_funcs.logging import exception_hook, set_loggers

log = set_loggers(log_dir="/tmp", tool_name="plot_world_map")
sys.excepthook = exception_hook
```

writes /tmp/plot_world_map.info.log, .warning.log, .errors.log (and .debug.log
if the level is logging.DEBUG) as well as logging to stdout.
"""

import logging
import os
import sys
from types import TracebackType
from typing import Type

DEFAULT_LOG_FORMAT = "%(levelname)s : %(asctime)s %(name)s : %(message)s"

# file suffix and minimum level of each log file
LOG_FILE_LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "errors": logging.ERROR,
    "debug": logging.DEBUG,
}

# attribute set on handlers added here, so they can be found and removed again
_HANDLER_TAG = "_worldmaps_handler"


def log_file_paths(log_dir: str, tool_name: str) -> dict[str, str]:
    """Get the log file path for each log level

    Args:
        log_dir (str): directory for log files
        tool_name (str): log file name prefix

    Returns:
        dict[str, str]: {'info': '<log_dir>/<tool_name>.info.log', 'warning': ..., ...}
    """
    return {
        level_name: os.path.join(log_dir, f"{tool_name}.{level_name}.log")
        for level_name in LOG_FILE_LEVELS
    }


def remove_loggers(log_name: str = ""):
    """Close and remove handlers previously added by set_loggers()

    Args:
        log_name (str): log name, default is "" (root logger)
    """
    log = logging.getLogger(log_name)
    for handler in list(log.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            log.removeHandler(handler)
            handler.close()


# pylint: disable = R0913, R0917
def set_loggers(
    log_dir: str = "/tmp",
    tool_name: str = "worldmaps",
    log_name: str = "",
    log_format: str = DEFAULT_LOG_FORMAT,
    default_log_level: int = logging.INFO,
    print_log_files: bool = True,
) -> logging.Logger:
    """
    Setup Logging handlers
    - direct log.ERROR messages -> <tool_name>.errors.log
    - direct log.WARNING (including log.ERROR) -> <tool_name>.warning.log
    - direct log.INFO (including log.ERROR, log.WARNING) -> <tool_name>.info.log
    - direct log.DEBUG (all levels) -> <tool_name>.debug.log, only if default_log_level is DEBUG
    - direct all allowed levels to stdout
    - set maximum allowed log level (default is log.INFO, ie no log.DEBUG messages)

    Handlers added by an earlier call are replaced, so the function can be called
    more than once in the same process.

    Args:
        log_dir (str) : directory for log files, created if it does not exist
        tool_name (str) : log file name prefix
        log_name (str) : log name, default is "" (root logger)
        log_format (str) : format string to use in logger
        default_log_level (int): default log level, default is logging.INFO
        print_log_files (bool): print the log file paths to stdout

    Returns:
        logging.Logger: the configured logger
    """
    os.makedirs(log_dir, exist_ok=True)

    log = logging.getLogger(log_name)
    remove_loggers(log_name)

    log_formatter = logging.Formatter(log_format, datefmt="%d/%m/%Y %H:%M:%S")

    # log messages -> stdout
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(log_formatter)
    stream_handler.setLevel(default_log_level)
    setattr(stream_handler, _HANDLER_TAG, True)
    log.addHandler(stream_handler)

    log_files = log_file_paths(log_dir, tool_name)
    for level_name, level in LOG_FILE_LEVELS.items():
        if level == logging.DEBUG and default_log_level != logging.DEBUG:
            continue
        file_handler = logging.FileHandler(log_files[level_name], mode="w")
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(level)
        setattr(file_handler, _HANDLER_TAG, True)
        log.addHandler(file_handler)

    log.setLevel(default_log_level)

    if print_log_files:
        for level_name, path in log_files.items():
            print(f"log file ({level_name.upper()}) :", path)

    return log


def exception_hook(
    exc_type: Type[BaseException], exc_value: BaseException, exc_traceback: TracebackType
) -> None:
    """Logs exception traceback output to the error log, instead of just to the console.

    Without this, these errors can be missed if the console is not checked.

    Args:
        exc_type (Type[BaseException]): The exception type.
        exc_value (BaseException): The exception instance.
        exc_traceback (TracebackType): The traceback object.
    """
    log = logging.getLogger("")
    log.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
