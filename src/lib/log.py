"""
Centralized logging using Loguru with context-aware verbosity.

LOG() checks the verbosity of the ProgramState connected to the current
context, so renderers and loaders can report progress without being handed
the state.

Behaviour:
- CLI runs connect their ProgramState; messages up to its verbosity appear
- library use connects nothing and stays silent
- SEMDOC_DEBUG_MODE=true shows every message, connected state or not

Usage:
    from semdoc.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Rendering markdown...", level=1)
    LOG("Wrote docs/tool.md", level=2)
    LOG("Rendering 42 fragments to ROFF", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

from ..config import appsettings

# ProgramState of the running pipeline, if any
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <16}</cyan> "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a ProgramState to the current logging context.

    Args:
        state: Object with a ``verbosity`` attribute, normally ProgramState
    """
    _program_state.set(state)


def verbosity_get() -> int:
    """Verbosity of the connected state, 0 when none is connected"""
    state = _program_state.get()
    return getattr(state, 'verbosity', 0) if state is not None else 0


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the current verbosity allows it.

    Args:
        message: Text to log
        level: Minimum verbosity (1=normal, 2=verbose -v, 3=debug -vv)
        **kwargs: Extra loguru formatting arguments
    """
    if appsettings.debug_mode or verbosity_get() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
