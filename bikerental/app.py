"""Command loop that processes menu commands from an input file."""

from __future__ import annotations

import argparse
from typing import Sequence, TextIO

from bikerental.controls import (
    AddBike,
    Join,
    Login,
    Logout,
    Quit,
    RentBike,
    RentedBikeInfo,
)
from bikerental.models import BikeList, LoggedInUser, Member, UserList
from bikerental.ui import (
    AddBikeUI,
    JoinUI,
    LoginUI,
    LogoutUI,
    QuitUI,
    RentBikeUI,
    RentedBikeInfoUI,
    TokenReader,
)

INPUT_FILE_NAME = "input.txt"
OUTPUT_FILE_NAME = "output.txt"


def do_task(reader: TokenReader, out: TextIO) -> None:
    """Run menu commands from reader until "6 1" or the end of input."""
    user_list = UserList()
    logged_in_user = LoggedInUser()
    bike_list = BikeList()
    member = Member()

    while True:
        try:
            menu = (reader.next_int(), reader.next_int())
        except EOFError:
            return

        match menu:
            case (1, 1):
                JoinUI(Join(user_list)).sign_up(reader, out)
            case (2, 1):
                LoginUI(Login(logged_in_user)).sign_in(reader, out)
            case (2, 2):
                LogoutUI(Logout(logged_in_user)).select_logout(reader, out)
            case (3, 1):
                AddBikeUI(AddBike(bike_list)).register_bike(reader, out)
            case (4, 1):
                RentBikeUI(RentBike(member, bike_list)).choose_bike(reader, out)
            case (5, 1):
                RentedBikeInfoUI(RentedBikeInfo(member)).select_rent_bike_info(reader, out)
            case (6, 1):
                QuitUI(Quit()).select_quit(reader, out)
                return


def run(input_path: str, output_path: str) -> None:
    """Process the commands in input_path and write the report to output_path."""
    with open(input_path, encoding="utf-8") as in_file, open(
        output_path, "w", encoding="utf-8"
    ) as out_file:
        do_task(TokenReader(in_file), out_file)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Process bike rental commands.")
    parser.add_argument("input", nargs="?", default=INPUT_FILE_NAME)
    parser.add_argument("output", nargs="?", default=OUTPUT_FILE_NAME)
    args = parser.parse_args(argv)
    run(args.input, args.output)
    return 0