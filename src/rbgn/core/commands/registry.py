"""
A decorator-based command registry.

Both the interpreter and the shell transpiler dispatch through this single
table, keyed by the command name as written in scripts.
"""

import importlib
import logging
import pkgutil
from collections.abc import Callable

from rbgn.core.commands.handler import ICommandHandler

logger = logging.getLogger(__name__)

HANDLERS_PACKAGE = "rbgn.core.commands.handlers"

_registry: dict[str, type[ICommandHandler]] = {}


def command(*names: str) -> Callable[[type[ICommandHandler]], type[ICommandHandler]]:
    """
    A decorator to register a command handler under one or more names.

    Args:
        names: The script names the handler answers to.

    Returns:
        A decorator that registers the command handler.
    """
    if not names:
        raise ValueError("At least one command name is required.")

    def decorator(cls: type[ICommandHandler]) -> type[ICommandHandler]:
        for name in names:
            if name in _registry:
                raise ValueError(f"Command '{name}' is already registered.")
            _registry[name] = cls
        return cls

    return decorator


def get_command_handler(name: str) -> type[ICommandHandler] | None:
    """
    Gets the command handler for a given command name.

    Args:
        name: The name of the command.

    Returns:
        The command handler class, or None if not found.
    """
    return _registry.get(name)


def get_all_commands() -> dict[str, type[ICommandHandler]]:
    """
    Gets all registered command handlers.

    Returns:
        A dictionary of command names to their handler classes.
    """
    return _registry.copy()


def load_handlers() -> None:
    """Import every handler module so their decorators register them."""
    package = importlib.import_module(HANDLERS_PACKAGE)
    for module in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{HANDLERS_PACKAGE}.{module.name}")
    logger.debug("Loaded %d commands: %s", len(_registry), sorted(_registry))


def build_handler_table() -> dict[str, ICommandHandler]:
    """Instantiate one handler per registered command name.

    Aliases of the same handler class share a single instance.
    """
    load_handlers()
    instances: dict[type[ICommandHandler], ICommandHandler] = {}
    table: dict[str, ICommandHandler] = {}
    for name, cls in _registry.items():
        if cls not in instances:
            instances[cls] = cls()
        table[name] = instances[cls]
    return table
