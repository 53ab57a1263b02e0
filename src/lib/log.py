"""
Centralized logging using Loguru with context-aware verbosity.

LOG() checks the verbosity of whichever ProgramState (or any object with a
``verbosity`` attribute) was last connected in the current context. When no
state is connected, as happens when the filter is embedded in a host
application, LOG() stays silent.

Usage:
    from ace_editor.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Filtered 3 files", level=1)
    LOG("Found 2 <ace> directives", level=2)
    LOG("Attribute string did not parse: ...", level=3)
"""

import sys
from contextvars import ContextVar
from typing import Any, Optional

from loguru import logger

# State whose verbosity gates LOG() in this context
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a state object to the logging context.

    Args:
        state: Object with an integer ``verbosity`` attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Example:
        LOG("Wrote output/index.html", level=1)
        LOG("Replaced directive at offset 120", level=3)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        # depth=1: report the caller's function and line
        logger.opt(depth=1).debug(message, **kwargs)
