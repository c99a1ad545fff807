"""Use-case controls that act on the domain objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from bikerental.models import BikeList, LoggedInUser, Member, UserList


@dataclass
class AddBike:
    """Registers new bikes."""

    bike_list: BikeList

    def add_new_bike(self, bike_id: str, bike_name: str) -> None:
        """Add a bike to the bike list."""
        self.bike_list.add_new_bike(bike_id, bike_name)


@dataclass
class Join:
    """Signs up new members."""

    user_list: UserList

    def join_new_member(self, user_id: str, password: str, phone_number: str) -> Member:
        """Create a member, add it to the user list and return it."""
        member = Member(user_id=user_id, password=password, phone_number=phone_number)
        self.user_list.add_user(member)
        return member


@dataclass
class Login:
    """Records which user is logged in."""

    logged_in_user: LoggedInUser

    def login_user(self, user_id: str, password: str) -> None:
        """Store the id of the user who logs in."""
        self.logged_in_user.user_id = user_id


@dataclass
class Logout:
    """Logs the current user out."""

    logged_in_user: LoggedInUser

    def logout_user(self) -> str:
        """Return the id of the user logging out."""
        return self.logged_in_user.user_id


@dataclass
class Quit:
    """Ends the session."""

    quit_requested: bool = field(default=False)

    def quit_system(self) -> None:
        """Mark the session as finished."""
        self.quit_requested = True


@dataclass
class RentBike:
    """Rents a registered bike to a member."""

    member: Member
    bike_list: BikeList

    def start_rent_bike(self, bike_id: str) -> str:
        """Rent the bike if it exists and return its name ("" if unknown)."""
        bike_name = self.bike_list.find_bike_name(bike_id)
        if bike_name:
            self.member.rented_bike_collection.add_rented_bike(bike_id, bike_name)
        return bike_name


@dataclass
class RentedBikeInfo:
    """Lists a member's rented bikes."""

    member: Member

    def show_member_bikes(self) -> list[str]:
        """Return "<id> <name>" for each rented bike, ordered by id."""
        return [str(bike) for bike in self.member.rented_bike_collection.rented_bikes()]