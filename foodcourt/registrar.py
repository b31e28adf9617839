"""Registration of users, owners and admins behind a one-time security code."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable

from foodcourt import config
from foodcourt.errors import Conflict, InvalidInput
from foodcourt.models import (
    Admin,
    IdentityPredicate,
    Owner,
    Record,
    User,
    admin_collides,
    owner_collides,
    parse_unsigned,
    same_user,
)
from foodcourt.persistence import RecordStore
from foodcourt.terminal import Terminal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationForm:
    """Prompts, record shape and messages for one registrable collection."""

    collection: str
    name_prompt: str
    number_prompt: str
    invalid_number: str
    build: Callable[[str, int], Record]
    collides: IdentityPredicate
    duplicate_message: str
    success_message: str


USER_FORM = RegistrationForm(
    collection=config.USERS,
    name_prompt="Enter your name:",
    number_prompt="Enter password:",
    invalid_number="Invalid password! Must be a number.",
    build=lambda name, number: User(name=name, password=number),
    collides=same_user,
    duplicate_message="Username already exists!",
    success_message="Registration successful!",
)

OWNER_FORM = RegistrationForm(
    collection=config.OWNERS,
    name_prompt="Enter your name:",
    number_prompt="Enter owner ID:",
    invalid_number="Invalid ID! Must be a number.",
    build=lambda name, number: Owner(owner_name=name, owner_id=number),
    collides=owner_collides,
    duplicate_message="Owner already exists with this name or ID!",
    success_message="Owner registered successfully!",
)

ADMIN_FORM = RegistrationForm(
    collection=config.ADMINS,
    name_prompt="Enter admin username:",
    number_prompt="Enter admin ID:",
    invalid_number="Invalid ID! Must be a number.",
    build=lambda name, number: Admin(admin_name=name, admin_id=number),
    collides=admin_collides,
    duplicate_message="Admin with this username or ID already exists!",
    success_message="Admin registered successfully!",
)


def generate_security_code(rng: random.Random) -> int:
    """Draw a code uniformly from the inclusive 4-digit range."""
    return rng.randint(config.SECURITY_CODE_MIN, config.SECURITY_CODE_MAX)


def check_security_code(expected: int, claimed: str) -> None:
    """Raise InvalidInput unless ``claimed`` parses to exactly ``expected``."""
    try:
        value = parse_unsigned(claimed)
    except ValueError:
        raise InvalidInput("Invalid security code!") from None
    if value != expected:
        raise InvalidInput("Security code does not match!")


def admit(records: list[Any], candidate: Record, collides: IdentityPredicate, message: str) -> list[Any]:
    """Return ``records`` plus ``candidate``, or raise Conflict on an identity clash."""
    if any(collides(existing, candidate) for existing in records):
        raise Conflict(message)
    return [*records, candidate]


class Registrar:
    """Runs the challenge-response registration against a store and terminal.

    Nothing is written unless every step succeeds, so any abort leaves the
    collection file untouched.
    """

    def __init__(self, store: RecordStore, terminal: Terminal, rng: random.Random | None = None) -> None:
        self.store = store
        self.terminal = terminal
        self.rng = rng or random.Random()

    def register(self, form: RegistrationForm) -> Record:
        records = self.store.load(form.collection)

        name = self.terminal.ask(form.name_prompt)
        try:
            number = parse_unsigned(self.terminal.ask(form.number_prompt))
        except ValueError:
            raise InvalidInput(form.invalid_number) from None

        code = generate_security_code(self.rng)
        self.terminal.say(f"Security code: {code}", style="bold cyan")
        check_security_code(code, self.terminal.ask("Enter the security code:"))

        candidate = form.build(name, number)
        updated = admit(records, candidate, form.collides, form.duplicate_message)
        self.store.save(form.collection, updated)
        logger.info("registered collection=%s name=%r", form.collection, name)
        self.terminal.success(form.success_message)
        return candidate
