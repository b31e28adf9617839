"""Catalog, cart and admin operations over loaded collection snapshots.

Every function takes the records it needs and either returns a new list for
the caller to persist or raises a WorkflowError. Inputs are never mutated.
"""

from __future__ import annotations

from decimal import Decimal

from foodcourt.errors import AuthenticationFailed, Conflict, InvalidInput, NotFound
from foodcourt.models import (
    Admin,
    CartItem,
    FoodMenu,
    Restaurant,
    User,
    parse_price,
    parse_unsigned,
    same_food,
    same_restaurant,
)


def find_restaurant(restaurants: list[Restaurant], name: str) -> Restaurant:
    for restaurant in restaurants:
        if restaurant.restaurant_name == name:
            return restaurant
    raise NotFound("Restaurant not found!")


def ensure_new_restaurant(restaurants: list[Restaurant], name: str) -> None:
    probe = Restaurant(restaurant_name=name, restaurant_category="")
    if any(same_restaurant(existing, probe) for existing in restaurants):
        raise Conflict("Restaurant with this name already exists!")


def add_restaurant(restaurants: list[Restaurant], name: str, category: str) -> list[Restaurant]:
    ensure_new_restaurant(restaurants, name)
    return [*restaurants, Restaurant(restaurant_name=name, restaurant_category=category)]


def ensure_new_food(foods: list[FoodMenu], restaurant_name: str, food_name: str) -> None:
    probe = FoodMenu(restaurant_name=restaurant_name, food_name=food_name, price=Decimal(0))
    if any(same_food(existing, probe) for existing in foods):
        raise Conflict("Food already exists in this restaurant's menu!")


def read_price(text: str) -> Decimal:
    try:
        return parse_price(text)
    except ValueError:
        raise InvalidInput("Invalid price! Must be a number.") from None


def add_food(
    restaurants: list[Restaurant],
    foods: list[FoodMenu],
    restaurant_name: str,
    food_name: str,
    price_text: str,
) -> list[FoodMenu]:
    """Append a dish to a known restaurant's menu."""
    find_restaurant(restaurants, restaurant_name)
    ensure_new_food(foods, restaurant_name, food_name)
    price = read_price(price_text)
    return [*foods, FoodMenu(restaurant_name=restaurant_name, food_name=food_name, price=price)]


def menu_for(restaurants: list[Restaurant], foods: list[FoodMenu], restaurant_name: str) -> list[FoodMenu]:
    """Menu items of one restaurant; empty when it exists but has no dishes."""
    find_restaurant(restaurants, restaurant_name)
    return [food for food in foods if food.restaurant_name == restaurant_name]


def add_to_cart(foods: list[FoodMenu], cart: list[CartItem], food_name: str) -> list[CartItem]:
    # Lookup spans every restaurant; the first exact match wins.
    for food in foods:
        if food.food_name == food_name:
            return [*cart, CartItem(food_name=food.food_name, price=food.price)]
    raise NotFound("Food not found!")


def remove_from_cart(cart: list[CartItem], food_name: str) -> list[CartItem]:
    for idx, item in enumerate(cart):
        if item.food_name == food_name:
            return cart[:idx] + cart[idx + 1 :]
    raise NotFound("Item not found in cart!")


def orders_for(restaurants: list[Restaurant], cart: list[CartItem], restaurant_name: str) -> list[CartItem]:
    """Orders shown to an owner.

    Cart items carry no restaurant or customer, so once the restaurant is
    known the whole shared cart is returned.
    """
    find_restaurant(restaurants, restaurant_name)
    return list(cart)


def authenticate_admin(admins: list[Admin], admin_name: str, admin_id_text: str) -> Admin:
    try:
        admin_id = parse_unsigned(admin_id_text)
    except ValueError:
        raise InvalidInput("Invalid admin ID!") from None
    for admin in admins:
        if admin.admin_name == admin_name and admin.admin_id == admin_id:
            return admin
    raise AuthenticationFailed("Admin authentication failed!")


def delete_user(users: list[User], name: str) -> list[User]:
    for idx, user in enumerate(users):
        if user.name == name:
            return users[:idx] + users[idx + 1 :]
    raise NotFound("User not found!")
