# bikerental

A small bike rental system. It reads a script of menu commands from an
input file, carries them out against in-memory lists of members and bikes,
and writes a log of what happened to an output file.

## Running

```
bikerental
```

With no arguments it reads `input.txt` and writes `output.txt` in the
current directory, both as UTF-8. You can also give the two paths:

```
bikerental my_input.txt my_output.txt
```

## Input format

The input is a stream of whitespace-separated tokens. Each command starts
with two integers, the menu and the sub-menu, followed by its arguments:

| Command | Arguments                    | Action               | Output heading        |
|---------|------------------------------|----------------------|-----------------------|
| `1 1`   | id password phone            | sign up a member     | `1.1. 회원가입`        |
| `2 1`   | id password                  | log in               | `2.1. 로그인`          |
| `2 2`   |                              | log out              | `2.2. 로그아웃`        |
| `3 1`   | bike-id bike-name            | register a bike      | `3.1. 자전거 등록`     |
| `4 1`   | bike-id                      | rent a bike          | `4.1. 자전거 대여`     |
| `5 1`   |                              | list rented bikes    | `5.1.자전거 대여 리스트` |
| `6 1`   |                              | quit                 | `6.1. 종료`            |

Each command writes its heading followed by a `> ` line echoing the
arguments (or, for `2 2`, the id of the user logging out; for `5 1`, one
`> <bike-id> <bike-name>` line per rented bike) and a blank line.

Processing stops at `6 1` or at the end of the input. A pair of numbers
that matches no command is skipped. A menu number that is not an integer
raises `ValueError`. Rented bikes are listed in ascending order of their
ids; renting an unknown bike id records nothing and leaves the bike name
blank in the output.

Example input:

```
1 1 alice password phone-number
2 1 alice password
3 1 B1 roadster
4 1 B1
5 1
2 2
6 1
```

## Using it from Python

```python
import io
from bikerental.app import do_task
from bikerental.ui import TokenReader

out = io.StringIO()
do_task(TokenReader("3 1 B1 roadster 4 1 B1 5 1 6 1"), out)
print(out.getvalue())
```

`TokenReader` takes either a string or an iterable of lines, such as an
open file. `bikerental.app.run(input_path, output_path)` does the same for
files, and `bikerental.app.main(argv)` is the command-line entry point.

The building blocks are available on their own:

- `bikerental.models`: `User`, `Manager`, `Member`, `Bike`, `BikeList`,
  `UserList`, `RentedBikeCollection`, `LoggedInUser`.
- `bikerental.controls`: `AddBike`, `Join`, `Login`, `Logout`, `Quit`,
  `RentBike`, `RentedBikeInfo`.
- `bikerental.ui`: `TokenReader` and the screens `JoinUI`, `LoginUI`,
  `LogoutUI`, `AddBikeUI`, `RentBikeUI`, `RentedBikeInfoUI`, `QuitUI`.

## What it does not do

- Nothing is stored between runs; all members and bikes live in memory.
- Logging in does not check the id or password against signed-up members,
  and logging out reports the current id without clearing it.
- All rentals in a run go to one shared member, whoever is logged in.
- There is no interactive prompt; commands come only from the input.