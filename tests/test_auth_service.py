import pytest

from auth_service import AuthService, hash_password, verify_password
from exceptions import AuthenticationError, DuplicateEmailError
from models import UserCreate, UserLogin
from repositories import UserRepository


def test_hash_and_verify():
    hashed = hash_password("s3cr3t")
    assert hashed != "s3cr3t"
    assert verify_password("s3cr3t", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("s3cr3t", "czNjcjN0")


def test_register_and_authenticate(db_engine):
    service = AuthService(UserRepository(db_engine))
    user = service.register_user(UserCreate(name="Ada", email=" Ada@Example.com ", password="pw"))
    assert user.email == "ada@example.com"

    assert service.authenticate_user(UserLogin(email="ada@example.com", password="pw")).id == user.id
    with pytest.raises(AuthenticationError):
        service.authenticate_user(UserLogin(email="ada@example.com", password="nope"))


def test_duplicate_registration_creates_no_user(db_engine):
    repository = UserRepository(db_engine)
    service = AuthService(repository)
    service.register_user(UserCreate(name="Ada", email="ada@example.com", password="pw"))

    with pytest.raises(DuplicateEmailError):
        service.register_user(UserCreate(name="Ada 2", email="ada@example.com", password="pw2"))
    assert repository.get(2) is None


def test_repository_ids_continue_after_restart(db_engine):
    UserRepository(db_engine).create_user("Ada", "ada@example.com", hash_password("pw"))
    reopened = UserRepository(db_engine)
    assert reopened.create_user("Bob", "bob@example.com", hash_password("pw")).id == 2
