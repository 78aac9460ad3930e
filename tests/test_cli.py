import logging

from lispy.__main__ import main


def test_eval_expressions(capsys):
    status = main(["--no-history", "-e", "(+ 1 2)", "-e", "(/ 1 0)", "-e", "(+ 1 2.5)"])
    out = capsys.readouterr().out
    assert status == 0
    assert out == "3\nError: Division By Zero!\n3.500000\n"


def test_eval_syntax_error_sets_status(capsys):
    status = main(["-e", "(+ 1", "-e", "(* 2 2)"])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == "4\n"
    assert captured.err.startswith("<eval>:1:")


def test_file_lines(tmp_path, capsys):
    src = tmp_path / "prog.lispy"
    src.write_text("(+ 1 2)\n\n(- 5)\n(5 1 2)\n")
    status = main([str(src)])
    out = capsys.readouterr().out
    assert status == 0
    assert out.splitlines() == ["3", "-5", "Error: S-expression Does not start with symbol!"]


def test_log_level_option(capsys):
    status = main(["--log-level", "debug", "-e", "(+ 1 2)"])
    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "3\n"
    assert "lispy" in captured.err
