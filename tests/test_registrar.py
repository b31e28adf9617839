import random

import pytest

from foodcourt import config
from foodcourt.errors import Conflict, InvalidInput
from foodcourt.models import Admin, Owner, User
from foodcourt.registrar import (
    ADMIN_FORM,
    OWNER_FORM,
    USER_FORM,
    Registrar,
    admit,
    check_security_code,
    generate_security_code,
)
from tests.conftest import SECURITY_CODE, FixedCode, output_of, read_collection, scripted_terminal


def registrar_for(store, *lines, code=SECURITY_CODE):
    return Registrar(store, scripted_terminal(lines), FixedCode(code))


def test_register_user_into_empty_collection(store):
    registrar = registrar_for(store, "alice", "42", str(SECURITY_CODE))
    assert registrar.register(USER_FORM) == User("alice", 42)

    assert read_collection(store, config.USERS) == [{"name": "alice", "password": 42}]
    out = output_of(registrar)
    assert f"Security code: {SECURITY_CODE}" in out
    assert "Registration successful!" in out


def test_code_is_drawn_from_four_digit_range(store):
    rng = FixedCode()
    Registrar(store, scripted_terminal(["bob", "1", str(SECURITY_CODE)]), rng).register(USER_FORM)
    assert rng.calls == [(1000, 9999)]


def test_generated_codes_stay_in_range():
    rng = random.Random(1234)
    codes = {generate_security_code(rng) for _ in range(5000)}
    assert min(codes) >= 1000
    assert max(codes) <= 9999


@pytest.mark.parametrize("claimed", ["999", "10000", "4320", "abc", ""])
def test_check_security_code_rejects(claimed):
    with pytest.raises(InvalidInput):
        check_security_code(SECURITY_CODE, claimed)


def test_check_security_code_accepts_exact_match():
    check_security_code(SECURITY_CODE, f" {SECURITY_CODE} ")


def test_admit_is_pure():
    records = [User("alice", 1)]
    assert admit(records, User("bob", 2), USER_FORM.collides, "dup") == [User("alice", 1), User("bob", 2)]
    assert records == [User("alice", 1)]
    with pytest.raises(Conflict, match="dup"):
        admit(records, User("alice", 9), USER_FORM.collides, "dup")


@pytest.mark.parametrize(
    "lines, error, message",
    [
        (["carol", "pw", "4321"], InvalidInput, "Invalid password! Must be a number."),
        (["carol", "5", "1234"], InvalidInput, "Security code does not match!"),
        (["carol", "5", "x"], InvalidInput, "Invalid security code!"),
        (["alice", "5", "4321"], Conflict, "Username already exists!"),
    ],
)
def test_user_registration_aborts_leave_file_untouched(store, lines, error, message):
    store.save(config.USERS, [User("alice", 42)])
    before = store.path_for(config.USERS).read_bytes()

    with pytest.raises(error, match=message):
        registrar_for(store, *lines).register(USER_FORM)

    assert store.path_for(config.USERS).read_bytes() == before


def test_bad_password_stops_before_code_is_shown(store):
    registrar = registrar_for(store, "carol", "pw")
    with pytest.raises(InvalidInput):
        registrar.register(USER_FORM)
    assert "Security code" not in output_of(registrar)
    assert not store.path_for(config.USERS).exists()


@pytest.mark.parametrize("name, owner_id", [("mario", 2), ("luigi", 1)])
def test_owner_collides_on_name_or_id(store, name, owner_id):
    store.save(config.OWNERS, [Owner("mario", 1)])
    with pytest.raises(Conflict, match="Owner already exists with this name or ID!"):
        registrar_for(store, name, str(owner_id), str(SECURITY_CODE)).register(OWNER_FORM)
    assert store.load(config.OWNERS) == [Owner("mario", 1)]


def test_owner_registration_appends(store):
    store.save(config.OWNERS, [Owner("mario", 1)])
    registrar_for(store, "luigi", "2", str(SECURITY_CODE)).register(OWNER_FORM)
    assert store.load(config.OWNERS) == [Owner("mario", 1), Owner("luigi", 2)]


@pytest.mark.parametrize("name, admin_id", [("root", 2), ("ops", 1)])
def test_admin_collides_on_name_or_id(store, name, admin_id):
    store.save(config.ADMINS, [Admin("root", 1)])
    with pytest.raises(Conflict, match="Admin with this username or ID already exists!"):
        registrar_for(store, name, str(admin_id), str(SECURITY_CODE)).register(ADMIN_FORM)
    assert store.load(config.ADMINS) == [Admin("root", 1)]


def test_admin_bad_id(store):
    with pytest.raises(InvalidInput, match="Invalid ID! Must be a number."):
        registrar_for(store, "root", "-3").register(ADMIN_FORM)
