"""Domain models for foodcourt collections."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, TypeVar

from foodcourt import config

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_unsigned(text: str) -> int:
    """Parse a 32-bit unsigned integer typed by the actor."""
    raw = text.strip()
    if not _UNSIGNED_RE.fullmatch(raw):
        raise ValueError(f"not an unsigned integer: {raw!r}")
    value = int(raw)
    if value > config.UNSIGNED_MAX:
        raise ValueError(f"out of range: {raw!r}")
    return value


def parse_price(text: str) -> Decimal:
    """Parse a finite decimal price typed by the actor."""
    raw = text.strip()
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"not a number: {raw!r}") from None
    if not value.is_finite():
        raise ValueError(f"not a finite number: {raw!r}")
    return value


def _coerce(value: Any, type_name: str) -> Any:
    if type_name == "str":
        if isinstance(value, str):
            return value
    elif type_name == "int":
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= config.UNSIGNED_MAX:
            return value
    elif type_name == "Decimal":
        if isinstance(value, Decimal) and value.is_finite():
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Decimal(value)
    raise TypeError(f"expected {type_name}, got {value!r}")


R = TypeVar("R", bound="Record")


class Record:
    """Mixin giving dataclass entities their JSON object form."""

    def to_record(self) -> dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]

    @classmethod
    def from_record(cls: type[R], raw: Any) -> R:
        """Build an entity from a decoded JSON object, rejecting any other shape."""
        if not isinstance(raw, dict):
            raise TypeError(f"{cls.__name__} record must be an object, got {type(raw).__name__}")
        declared = {f.name: str(f.type) for f in fields(cls)}  # type: ignore[arg-type]
        if set(raw) != set(declared):
            raise TypeError(f"{cls.__name__} record fields {sorted(raw)} != {sorted(declared)}")
        return cls(**{name: _coerce(raw[name], type_name) for name, type_name in declared.items()})


@dataclass(frozen=True)
class User(Record):
    name: str
    password: int


@dataclass(frozen=True)
class Owner(Record):
    owner_name: str
    owner_id: int


@dataclass(frozen=True)
class Admin(Record):
    admin_name: str
    admin_id: int


@dataclass(frozen=True)
class Restaurant(Record):
    restaurant_name: str
    restaurant_category: str


@dataclass(frozen=True)
class FoodMenu(Record):
    """A dish offered by one restaurant."""

    restaurant_name: str
    food_name: str
    price: Decimal


@dataclass(frozen=True)
class CartItem(Record):
    """A line in the single shared shopping cart."""

    food_name: str
    price: Decimal


@dataclass(frozen=True)
class Order(Record):
    """Order line. Defined for the orders collection; no workflow writes it yet."""

    restaurant_name: str
    customer_name: str
    food_name: str


# Identity predicates: True when two records may not coexist in one collection.
def same_user(a: User, b: User) -> bool:
    return a.name == b.name


def owner_collides(a: Owner, b: Owner) -> bool:
    return a.owner_name == b.owner_name or a.owner_id == b.owner_id


def admin_collides(a: Admin, b: Admin) -> bool:
    return a.admin_name == b.admin_name or a.admin_id == b.admin_id


def same_restaurant(a: Restaurant, b: Restaurant) -> bool:
    return a.restaurant_name == b.restaurant_name


def same_food(a: FoodMenu, b: FoodMenu) -> bool:
    return a.restaurant_name == b.restaurant_name and a.food_name == b.food_name


IdentityPredicate = Callable[[Any, Any], bool]

RECORD_TYPES: dict[str, type[Record]] = {
    config.USERS: User,
    config.OWNERS: Owner,
    config.ADMINS: Admin,
    config.RESTAURANTS: Restaurant,
    config.FOODS: FoodMenu,
    config.CART: CartItem,
    config.ORDERS: Order,
}
