"""Menu state machine driving the role menus."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from foodcourt import actions
from foodcourt.actions import Session
from foodcourt.errors import WorkflowError
from foodcourt.models import parse_unsigned
from foodcourt.rendering import format_menu
from foodcourt.terminal import Terminal

logger = logging.getLogger(__name__)


class MenuState(str, Enum):
    MAIN = "Main"
    USER = "User"
    OWNER = "Owner"
    ADMIN = "Admin"
    EXIT = "Exit"


@dataclass(frozen=True)
class MenuOption:
    """A numbered entry: either runs a leaf action or moves to another state."""

    label: str
    action: Callable[[Session], None] | None = None
    target: MenuState | None = None


MENUS: dict[MenuState, list[MenuOption]] = {
    MenuState.MAIN: [
        MenuOption("User", target=MenuState.USER),
        MenuOption("Owner", target=MenuState.OWNER),
        MenuOption("Admin", target=MenuState.ADMIN),
        MenuOption("Exit", target=MenuState.EXIT),
    ],
    MenuState.USER: [
        MenuOption("Register", action=actions.register_user),
        MenuOption("View restaurants", action=actions.view_restaurants),
        MenuOption("View menu", action=actions.view_menu),
        MenuOption("Add to cart", action=actions.add_to_cart),
        MenuOption("Delete from cart", action=actions.delete_from_cart),
        MenuOption("Back", target=MenuState.MAIN),
    ],
    MenuState.OWNER: [
        MenuOption("Register owner", action=actions.register_owner),
        MenuOption("Register restaurant", action=actions.register_restaurant),
        MenuOption("Make menu", action=actions.make_menu),
        MenuOption("View orders", action=actions.view_orders),
        MenuOption("Back", target=MenuState.MAIN),
    ],
    MenuState.ADMIN: [
        MenuOption("Register admin", action=actions.register_admin),
        MenuOption("View users", action=actions.view_users),
        MenuOption("Delete user", action=actions.delete_user),
        MenuOption("Back", target=MenuState.MAIN),
    ],
}


class FoodCourtApp:
    """Main -> role menu -> leaf action, until Exit or end of input.

    Leaf actions keep no state between runs. A WorkflowError aborts only the
    current action; StorageError is left to propagate.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.state = MenuState.MAIN

    @property
    def terminal(self) -> Terminal:
        return self.session.terminal

    def run(self) -> None:
        logger.info("app_start")
        try:
            while self.state is not MenuState.EXIT:
                self.step()
        except (EOFError, KeyboardInterrupt):
            logger.info("input closed state=%s", self.state.value)
            self.terminal.say("\nExiting program...")
            self.state = MenuState.EXIT
        logger.info("app_exit")

    def step(self) -> None:
        """Show the current menu and handle one selection."""
        options = MENUS[self.state]
        self.terminal.show(format_menu(self.state.value, [option.label for option in options]))
        raw = self.terminal.ask(">")

        try:
            choice = parse_unsigned(raw)
        except ValueError:
            self.terminal.error("Please enter a valid number!")
            return
        if not (1 <= choice <= len(options)):
            self.terminal.error("Invalid choice!")
            return

        self._select(options[choice - 1])

    def _select(self, option: MenuOption) -> None:
        if option.action is not None:
            self._run_action(option)
            return

        if option.target is None:
            return
        logger.debug("transition %s -> %s", self.state.value, option.target.value)
        self.state = option.target
        if self.state is MenuState.EXIT:
            self.terminal.say("Exiting program...")

    def _run_action(self, option: MenuOption) -> None:
        logger.debug("action_enter state=%s action=%r", self.state.value, option.label)
        try:
            option.action(self.session)  # type: ignore[misc]
        except WorkflowError as exc:
            logger.info("action_rejected action=%r reason=%s error=%r", option.label, type(exc).__name__, str(exc))
            self.terminal.error(str(exc))
