"""Post ownership as an explicit Owned/Anonymous value instead of a nullable id."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Identity:
    user_id: str
    email: Optional[str] = None


@dataclass(frozen=True)
class Owned:
    user_id: str


@dataclass(frozen=True)
class Anonymous:
    pass


Owner = Union[Owned, Anonymous]

ANONYMOUS = Anonymous()


def owner_of(user_id: Optional[str]) -> Owner:
    return Owned(str(user_id)) if user_id else ANONYMOUS


def owner_column(owner: Owner) -> Optional[str]:
    if isinstance(owner, Owned):
        return owner.user_id
    return None


def can_modify(owner: Owner, identity: Optional[Identity]) -> bool:
    # Anonymous and legacy posts have no owner, so nobody may modify them.
    if identity is None or not isinstance(owner, Owned):
        return False
    return owner.user_id == identity.user_id
