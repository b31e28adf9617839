"""Rich renderables for menus and collection listings."""

from __future__ import annotations

from decimal import Decimal

from rich.table import Table
from rich.text import Text

from foodcourt.models import CartItem, FoodMenu, Restaurant, User

HEADER_STYLE = "bold cyan"
NAME_STYLE = "magenta"


def badge_style(role: str) -> str:
    """Return a consistent badge style for a menu's role."""
    if role == "Owner":
        return "bold #ffffff on #b23a48"
    if role == "Admin":
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_price(price: Decimal) -> str:
    return f"${price:.2f}"


def format_menu(title: str, options: list[str]) -> Text:
    """Render a numbered menu under a colored title badge."""
    text = Text()
    text.append("\n")
    text.append(f" {title} Menu ", style=badge_style(title))
    for idx, label in enumerate(options, start=1):
        text.append(f"\n{idx}. {label}")
    return text


def _table(title: str | Text | None = None) -> Table:
    return Table(title=title, title_style="bold green", header_style=HEADER_STYLE, title_justify="left")


def restaurants_table(restaurants: list[Restaurant]) -> Table:
    table = _table("Available Restaurants")
    table.add_column("Restaurant Name")
    table.add_column("Category")
    for restaurant in restaurants:
        table.add_row(Text(restaurant.restaurant_name, style=NAME_STYLE), Text(restaurant.restaurant_category))
    return table


def menu_table(restaurant_name: str, foods: list[FoodMenu]) -> Table:
    table = _table(Text(f"Menu for '{restaurant_name}'"))
    table.add_column("Food Name")
    table.add_column("Price", justify="right")
    for food in foods:
        table.add_row(Text(food.food_name), format_price(food.price))
    return table


def orders_table(restaurant_name: str, cart: list[CartItem]) -> Table:
    """Cart lines shown as a restaurant's orders.

    Cart items record no customer, so that column is always a placeholder.
    """
    table = _table(Text(f"Orders for '{restaurant_name}'"))
    table.add_column("Customer")
    table.add_column("Food")
    table.add_column("Price", justify="right")
    for item in cart:
        table.add_row("-", Text(item.food_name, style=NAME_STYLE), format_price(item.price))
    return table


def users_table(users: list[User]) -> Table:
    table = _table("Registered Users")
    table.add_column("Username")
    table.add_column("Password")
    for user in users:
        table.add_row(Text(user.name), str(user.password))
    return table


def cart_lines(cart: list[CartItem]) -> Text:
    text = Text()
    text.append("Items in your cart:", style="bold")
    for idx, item in enumerate(cart, start=1):
        text.append(f"\n{idx}. {item.food_name} - {format_price(item.price)}")
    return text


def username_lines(users: list[User]) -> Text:
    text = Text()
    text.append("Current Users:", style="bold")
    for idx, user in enumerate(users, start=1):
        text.append(f"\n{idx}. {user.name}")
    return text
