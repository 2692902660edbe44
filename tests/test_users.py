import pytest

from warehousesim.users import UserError, UserStore, register_user

password = "password"


@pytest.fixture
def store(tmp_path):
    return UserStore(tmp_path / "user.dat")


def test_missing_file_has_no_users(store):
    assert store.exists("alice") is False
    assert store.authenticate("alice", password) is False


def test_add_then_exists_and_authenticate(store):
    store.add("alice", password)
    assert store.exists("alice") is True
    assert store.authenticate("alice", password) is True


def test_file_format(store):
    store.add("alice", password)
    store.add("bob", password)
    assert store.path.read_text(encoding="utf-8") == "alice password\nbob password\n"


def test_wrong_password_rejected(store):
    store.add("alice", password)
    assert store.authenticate("alice", "secret") is False


def test_unknown_account_rejected(store):
    store.add("alice", password)
    assert store.exists("bob") is False
    assert store.authenticate("bob", password) is False


def test_prefix_is_not_a_match(store):
    store.add("alice", password)
    assert store.exists("ali") is False
    assert store.authenticate("ali", password) is False


def test_duplicate_add_raises(store):
    store.add("alice", password)
    with pytest.raises(UserError):
        store.add("alice", "secret")
    assert store.authenticate("alice", "secret") is False


def test_register_user_success(store):
    register_user(store, "carol", password, password)
    assert store.authenticate("carol", password) is True


@pytest.mark.parametrize(
    "account, first, second",
    [("", "password", "password"), ("carol", "", "password"), ("carol", "password", "")],
)
def test_register_requires_all_fields(store, account, first, second):
    with pytest.raises(UserError):
        register_user(store, account, first, second)
    assert store.exists("carol") is False


def test_register_mismatched_passwords(store):
    with pytest.raises(UserError):
        register_user(store, "carol", password, "secret")
    assert store.exists("carol") is False


def test_register_duplicate(store):
    register_user(store, "carol", password, password)
    with pytest.raises(UserError):
        register_user(store, "carol", password, password)


def test_unwritable_location_raises(tmp_path):
    bad = UserStore(tmp_path / "missing_dir" / "user.dat")
    with pytest.raises(UserError):
        bad.add("alice", password)