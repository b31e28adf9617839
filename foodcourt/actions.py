"""Interactive leaf actions reachable from the role menus.

Each action reloads what it needs, prompts in order, and only saves once
every check has passed. Rejections surface as WorkflowError.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from foodcourt import catalog, config
from foodcourt.persistence import RecordStore
from foodcourt.registrar import ADMIN_FORM, OWNER_FORM, USER_FORM, Registrar
from foodcourt.rendering import (
    cart_lines,
    menu_table,
    orders_table,
    restaurants_table,
    username_lines,
    users_table,
)
from foodcourt.terminal import Terminal

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Collaborators shared by every action; holds no collection state."""

    store: RecordStore
    terminal: Terminal
    rng: random.Random = field(default_factory=random.Random)

    @property
    def registrar(self) -> Registrar:
        return Registrar(self.store, self.terminal, self.rng)


# User menu


def register_user(session: Session) -> None:
    session.registrar.register(USER_FORM)


def view_restaurants(session: Session) -> None:
    restaurants = session.store.load(config.RESTAURANTS)
    if not restaurants:
        session.terminal.warn("No restaurants available!")
        return
    session.terminal.show(restaurants_table(restaurants))


def view_menu(session: Session) -> None:
    restaurants = session.store.load(config.RESTAURANTS)
    foods = session.store.load(config.FOODS)
    name = session.terminal.ask("Enter restaurant name:")

    items = catalog.menu_for(restaurants, foods, name)
    if not items:
        session.terminal.warn("No menu items found for this restaurant!")
        return
    session.terminal.show(menu_table(name, items))


def add_to_cart(session: Session) -> None:
    cart = session.store.load(config.CART)
    foods = session.store.load(config.FOODS)
    food_name = session.terminal.ask("Enter food name:")

    session.store.save(config.CART, catalog.add_to_cart(foods, cart, food_name))
    logger.info("cart add food=%r", food_name)
    session.terminal.success("Added to cart successfully!")


def delete_from_cart(session: Session) -> None:
    cart = session.store.load(config.CART)
    if not cart:
        session.terminal.warn("Your cart is empty!")
        return

    session.terminal.show(cart_lines(cart))
    food_name = session.terminal.ask("Enter food name to remove:")

    session.store.save(config.CART, catalog.remove_from_cart(cart, food_name))
    logger.info("cart remove food=%r", food_name)
    session.terminal.success("Item removed from cart!")


# Owner menu


def register_owner(session: Session) -> None:
    session.registrar.register(OWNER_FORM)


def register_restaurant(session: Session) -> None:
    restaurants = session.store.load(config.RESTAURANTS)
    name = session.terminal.ask("Enter restaurant name:")
    catalog.ensure_new_restaurant(restaurants, name)
    category = session.terminal.ask("Enter restaurant category:")

    session.store.save(config.RESTAURANTS, catalog.add_restaurant(restaurants, name, category))
    logger.info("restaurant added name=%r", name)
    session.terminal.success("Restaurant added successfully!")


def make_menu(session: Session) -> None:
    foods = session.store.load(config.FOODS)
    restaurants = session.store.load(config.RESTAURANTS)

    restaurant_name = session.terminal.ask("Enter restaurant name:")
    catalog.find_restaurant(restaurants, restaurant_name)
    food_name = session.terminal.ask("Enter food name:")
    catalog.ensure_new_food(foods, restaurant_name, food_name)
    price_text = session.terminal.ask("Enter price:")

    updated = catalog.add_food(restaurants, foods, restaurant_name, food_name, price_text)
    session.store.save(config.FOODS, updated)
    logger.info("menu item added restaurant=%r food=%r", restaurant_name, food_name)
    session.terminal.success("Food added to menu successfully!")


def view_orders(session: Session) -> None:
    cart = session.store.load(config.CART)
    restaurants = session.store.load(config.RESTAURANTS)
    name = session.terminal.ask("Enter restaurant name to view its orders:")

    orders = catalog.orders_for(restaurants, cart, name)
    if not orders:
        session.terminal.warn("No orders found for this restaurant!")
        return
    session.terminal.show(orders_table(name, orders))


# Admin menu


def register_admin(session: Session) -> None:
    session.registrar.register(ADMIN_FORM)


def _authenticate(session: Session) -> None:
    admins = session.store.load(config.ADMINS)
    admin_name = session.terminal.ask("Enter admin username:")
    admin_id_text = session.terminal.ask("Enter admin ID:")
    admin = catalog.authenticate_admin(admins, admin_name, admin_id_text)
    logger.info("admin authenticated name=%r", admin.admin_name)


def view_users(session: Session) -> None:
    users = session.store.load(config.USERS)
    _authenticate(session)
    session.terminal.show(users_table(users))


def delete_user(session: Session) -> None:
    users = session.store.load(config.USERS)
    _authenticate(session)

    session.terminal.show(username_lines(users))
    username = session.terminal.ask("Enter username to delete:")

    session.store.save(config.USERS, catalog.delete_user(users, username))
    logger.info("user deleted name=%r", username)
    session.terminal.success("User deleted successfully!")
