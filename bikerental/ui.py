"""Boundary classes that read commands from a token stream and write reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

from bikerental.controls import (
    AddBike,
    Join,
    Login,
    Logout,
    Quit,
    RentBike,
    RentedBikeInfo,
)


class TokenReader:
    """Reads whitespace-separated tokens from text, lazily and line by line."""

    def __init__(self, source: str | Iterable[str]) -> None:
        lines: Iterable[str] = [source] if isinstance(source, str) else source
        self._tokens: Iterator[str] = (token for line in lines for token in line.split())

    def next_token(self) -> str:
        """Return the next token, or "" once the input is used up."""
        return next(self._tokens, "")

    def next_int(self) -> int:
        """Return the next token as an integer.

        Raises EOFError at the end of input and ValueError if the token is
        not an integer.
        """
        token = next(self._tokens, None)
        if token is None:
            raise EOFError("no more input")
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def _report(out: TextIO, title: str, *fields: str) -> None:
    out.write(f"{title} \n> {' '.join(fields)}\n\n")


@dataclass
class JoinUI:
    """Sign-up screen."""

    join: Join

    def sign_up(self, reader: TokenReader, out: TextIO) -> None:
        """Read id, password and phone number, sign up and report."""
        user_id = reader.next_token()
        password = reader.next_token()
        phone_number = reader.next_token()
        self.join.join_new_member(user_id, password, phone_number)
        _report(out, "1.1. 회원가입", user_id, password, phone_number)


@dataclass
class LoginUI:
    """Login screen."""

    login: Login

    def sign_in(self, reader: TokenReader, out: TextIO) -> None:
        """Read id and password, log in and report."""
        user_id = reader.next_token()
        password = reader.next_token()
        self.login.login_user(user_id, password)
        _report(out, "2.1. 로그인", user_id, password)


@dataclass
class LogoutUI:
    """Logout screen."""

    logout: Logout

    def select_logout(self, reader: TokenReader, out: TextIO) -> None:
        """Log the current user out and report its id."""
        _report(out, "2.2. 로그아웃", self.logout.logout_user())


@dataclass
class AddBikeUI:
    """Bike registration screen."""

    add_bike: AddBike

    def register_bike(self, reader: TokenReader, out: TextIO) -> None:
        """Read a bike id and name, register the bike and report."""
        bike_id = reader.next_token()
        bike_name = reader.next_token()
        self.add_bike.add_new_bike(bike_id, bike_name)
        _report(out, "3.1. 자전거 등록", bike_id, bike_name)


@dataclass
class RentBikeUI:
    """Bike rental screen."""

    rent_bike: RentBike

    def choose_bike(self, reader: TokenReader, out: TextIO) -> None:
        """Read a bike id, rent the bike and report its id and name."""
        bike_id = reader.next_token()
        bike_name = self.rent_bike.start_rent_bike(bike_id)
        _report(out, "4.1. 자전거 대여", bike_id, bike_name)


@dataclass
class RentedBikeInfoUI:
    """Rented bike listing screen."""

    rented_bike_info: RentedBikeInfo

    def select_rent_bike_info(self, reader: TokenReader, out: TextIO) -> None:
        """Write the member's rented bikes, one per line."""
        out.write("5.1.자전거 대여 리스트 \n")
        for bike_info in self.rented_bike_info.show_member_bikes():
            out.write(f"> {bike_info}\n")
        out.write("\n")


@dataclass
class QuitUI:
    """Exit screen."""

    quit: Quit

    def select_quit(self, reader: TokenReader, out: TextIO) -> None:
        """End the session and report it."""
        self.quit.quit_system()
        out.write("6.1. 종료\n")