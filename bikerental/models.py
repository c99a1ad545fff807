"""Domain objects: users, bikes and the collections that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class User:
    """A user account identified by an id and a password."""

    user_id: str = ""
    password: str = ""


@dataclass
class Manager(User):
    """A user with administrative rights."""


@dataclass(frozen=True)
class Bike:
    """A bike with its id and name."""

    bike_id: str
    name: str

    def __str__(self) -> str:
        return f"{self.bike_id} {self.name}"


class RentedBikeCollection:
    """Bikes rented by one member, kept in ascending order of bike id."""

    def __init__(self) -> None:
        self._bikes: list[Bike] = []

    def add_rented_bike(self, bike_id: str, bike_name: str) -> None:
        """Record a rented bike and keep the collection sorted by id."""
        self._bikes.append(Bike(bike_id, bike_name))
        self._bikes.sort(key=lambda bike: bike.bike_id)

    def rented_bikes(self) -> list[Bike]:
        """Return the rented bikes in ascending order of id."""
        return list(self._bikes)

    def __len__(self) -> int:
        return len(self._bikes)

    def __iter__(self) -> Iterator[Bike]:
        return iter(self._bikes)


@dataclass
class Member(User):
    """A registered member who can rent bikes."""

    phone_number: str = ""
    rented_bike_collection: RentedBikeCollection = field(
        default_factory=RentedBikeCollection, repr=False, compare=False
    )


class BikeList:
    """All bikes registered in the system, in registration order."""

    def __init__(self) -> None:
        self._bikes: list[Bike] = []

    def add_new_bike(self, bike_id: str, bike_name: str) -> None:
        """Register a new bike."""
        self._bikes.append(Bike(bike_id, bike_name))

    def find_bike_name(self, bike_id: str) -> str:
        """Return the name of the first bike with this id, or "" if there is none."""
        return next((bike.name for bike in self._bikes if bike.bike_id == bike_id), "")

    def __len__(self) -> int:
        return len(self._bikes)

    def __iter__(self) -> Iterator[Bike]:
        return iter(self._bikes)


class UserList:
    """Users that have signed up, in sign-up order."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def add_user(self, user: User) -> None:
        """Add a signed-up user."""
        self._users.append(user)

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)


class LoggedInUser:
    """Holds the user currently logged in."""

    def __init__(self) -> None:
        self._user = User()

    @property
    def user_id(self) -> str:
        """Id of the user currently logged in ("" before anyone logs in)."""
        return self._user.user_id

    @user_id.setter
    def user_id(self, value: str) -> None:
        self._user.user_id = value