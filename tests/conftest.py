"""Shared pytest fixtures for attrkit tests."""

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


@dataclass
class User:
    """Record with visible, annotated, and hidden fields."""

    Username: str = field(metadata={"json": "username", "db": "uname"})
    Age: int = field(default=0, metadata={"meta": "important"})
    _password: str = "secret"


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class Account(BaseModel):
    """Pydantic record with a private attribute."""

    owner: str = Field(json_schema_extra={"json": "owner_name"})
    balance: float = 0.0
    tags: list[str] = Field(default_factory=list)
    _token: str = PrivateAttr(default="t0ken")


class FrozenAccount(BaseModel):
    owner: str

    model_config = ConfigDict(frozen=True)


@pytest.fixture
def user() -> User:
    """Return the canonical example user."""
    return User(Username="srathi", Age=30, _password="secret")


@pytest.fixture
def point() -> Point:
    return Point(x=1, y=2)


@pytest.fixture
def account() -> Account:
    """Return a pydantic account with one tag."""
    return Account(owner="srathi", balance=10.5, tags=["vip"])


@pytest.fixture
def frozen_account() -> FrozenAccount:
    return FrozenAccount(owner="srathi")
