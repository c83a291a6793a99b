# src/todo_tactician/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..cli.prompts import Ask
from ..core.state import AppState
from ..errors import TodoError

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState, ask: Ask = input) -> None:
    """
    Menu loop: read a choice, run the command, print its reply.

    Stops after the quit command (which saves first). End of input stops the
    loop without saving.
    """
    logger.info("Console started path=%s tasks=%d", state.tasks_path, len(state.store))

    while not state.finished:
        print()
        print(command_registry.build_menu())
        try:
            choice = ask("> ")
        except EOFError:
            logger.info("Console EOF received, exiting without save.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting without save.")
            print()
            break

        try:
            reply = command_registry.handle(state, choice, ask)
        except EOFError:
            logger.info("Console EOF received inside a command, exiting without save.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt inside a command, exiting without save.")
            print()
            break
        except TodoError as e:
            logger.warning("Command rejected: %s", e)
            reply = f"Error: {e}"

        print(reply)

    logger.info("Console finished.")
