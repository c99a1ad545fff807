import io

import pytest

from bikerental.app import do_task, main, run
from bikerental.ui import TokenReader

SCRIPT = """1 1 alice password 000
2 1 alice password
3 1 B2 road
3 1 B1 city
4 1 B2
4 1 B1
5 1
2 2
6 1
"""

EXPECTED = (
    "1.1. 회원가입 \n> alice password 000\n\n"
    "2.1. 로그인 \n> alice password\n\n"
    "3.1. 자전거 등록 \n> B2 road\n\n"
    "3.1. 자전거 등록 \n> B1 city\n\n"
    "4.1. 자전거 대여 \n> B2 road\n\n"
    "4.1. 자전거 대여 \n> B1 city\n\n"
    "5.1.자전거 대여 리스트 \n> B1 city\n> B2 road\n\n"
    "2.2. 로그아웃 \n> alice\n\n"
    "6.1. 종료\n"
)


def test_do_task_full_session():
    out = io.StringIO()
    do_task(TokenReader(SCRIPT), out)
    assert out.getvalue() == EXPECTED


def test_do_task_stops_after_quit():
    out = io.StringIO()
    do_task(TokenReader("6 1\n1 1 bob password 000\n"), out)
    assert out.getvalue() == "6.1. 종료\n"


def test_do_task_stops_at_end_of_input():
    out = io.StringIO()
    do_task(TokenReader("2 2\n"), out)
    assert out.getvalue() == "2.2. 로그아웃 \n> \n\n"


def test_do_task_ignores_unknown_menus():
    out = io.StringIO()
    do_task(TokenReader("9 9\n1 5\n6 1\n"), out)
    assert out.getvalue() == "6.1. 종료\n"


def test_do_task_rejects_non_numeric_menu():
    with pytest.raises(ValueError):
        do_task(TokenReader("x 1\n"), io.StringIO())


def test_run_reads_and_writes_files(tmp_path):
    input_path = tmp_path / "in.txt"
    output_path = tmp_path / "out.txt"
    input_path.write_text(SCRIPT, encoding="utf-8")
    run(str(input_path), str(output_path))
    assert output_path.read_text(encoding="utf-8") == EXPECTED


def test_main_uses_default_file_names(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_text(SCRIPT, encoding="utf-8")
    assert main([]) == 0
    assert (tmp_path / "output.txt").read_text(encoding="utf-8") == EXPECTED


def test_main_with_explicit_paths(tmp_path):
    input_path = tmp_path / "commands.txt"
    output_path = tmp_path / "report.txt"
    input_path.write_text("6 1\n", encoding="utf-8")
    assert main([str(input_path), str(output_path)]) == 0
    assert output_path.read_text(encoding="utf-8") == "6.1. 종료\n"