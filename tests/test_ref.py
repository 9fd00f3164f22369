import pytest

from day03.ref import main, solve_parts

from .test_schematic import EXAMPLE


def test_solve_parts():
    assert solve_parts(EXAMPLE) == (4361, 467835)


def test_main_prints_both_parts(tmp_path, capsys):
    input_file = tmp_path / "input.txt"
    input_file.write_text(EXAMPLE)

    assert main([str(input_file)]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == ["Part 1: 4361", "Part 2: 467835"]


def test_main_reads_sys_argv(tmp_path, capsys, monkeypatch):
    input_file = tmp_path / "input.txt"
    input_file.write_text("..*..\n.1.1.\n.....\n")
    monkeypatch.setattr("sys.argv", ["day03", str(input_file), "-v"])

    main()

    assert "Part 1: 2" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["-v", "--verbose"])
def test_main_flag_before_input_file(tmp_path, capsys, flag):
    input_file = tmp_path / "input.txt"
    input_file.write_text("1*2")

    assert main([flag, str(input_file)]) == 0

    assert capsys.readouterr().out.splitlines() == ["Part 1: 3", "Part 2: 2"]


def test_main_without_input_file(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "usage: day03" in capsys.readouterr().err


def test_main_rejects_extra_arguments(tmp_path):
    input_file = tmp_path / "input.txt"
    input_file.write_text("1*2")

    with pytest.raises(SystemExit) as exc:
        main([str(input_file), "junk"])
    assert exc.value.code == 2


def test_main_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "nope.txt")])
