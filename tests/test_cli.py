import pytest

from drillbook.cli import main, run
from drillbook.level1 import countdown, diagonal_pattern
from drillbook.level2 import last_number_seen, snail
from drillbook.level3 import view_count


def test_compare_answers_first_case():
    assert run("2070", "1\n3 8\n") == "#1 <\n"


def test_compare_stops_after_first_case():
    single = run("2070", "1\n4 1\n")
    assert run("2070", "3\n4 1\n3 3\n1 2\n") == single


def test_compare_no_cases():
    assert run("2070", "0\n") == ""


def test_snail_output_round_trip():
    output = run("1954", "2\n1\n4\n")
    lines = output.splitlines()
    assert lines[0] == "#1"
    assert lines[2] == "#2"
    assert [[int(v) for v in line.split()] for line in lines[1:2]] == snail(1)
    assert [[int(v) for v in line.split()] for line in lines[3:]] == snail(4)
    assert lines[3].endswith(" ")


def test_countdown_output_matches_function():
    values = [int(v) for v in run("1545", "6").split()]
    assert values == countdown(6)


def test_diagonal_output_ignores_input():
    assert run("2027", "").splitlines() == diagonal_pattern()


def test_dates_output():
    lines = run("2056", "2\n20230115\n20231301\n").splitlines()
    assert lines[0] == "#1 2023/01/15"
    assert lines[1] == "#2 -1"


def test_averages_always_three_lines():
    lines = run("2071", "1\n" + " ".join(["5"] * 10)).splitlines()
    assert [line.split()[0] for line in lines] == ["#1", "#2", "#3"]
    assert lines[0] == "#1 5"
    assert lines[1].endswith(" 0")


def test_sheep_output_uses_solver():
    assert run("1288", "1\n7\n") == f"#1 {last_number_seen(7)}\n"


def test_view_reads_ten_cases():
    heights = [0, 0, 3, 5, 2, 4, 9, 0, 6, 4, 0, 6, 0, 0]
    case = f"{len(heights)}\n{' '.join(map(str, heights))}\n"
    lines = run("1206", case * 10).splitlines()
    assert len(lines) == 10
    assert all(line == f"#{i} {view_count(heights)}" for i, line in enumerate(lines, start=1))


def test_unknown_problem():
    with pytest.raises(ValueError):
        run("9999", "1")


def test_truncated_input():
    with pytest.raises(ValueError, match="end of input"):
        run("2070", "1\n3\n")


def test_non_integer_input():
    with pytest.raises(ValueError, match="integer"):
        run("1986", "1\nabc\n")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1\n3\n", encoding="utf-8")
    assert main(["1954", str(path)]) == 0
    assert capsys.readouterr().out == run("1954", "1\n3\n")


def test_main_reports_bad_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("1\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["2070", str(path)])
    assert excinfo.value.code == 1


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit) as excinfo:
        main(["0000"])
    assert excinfo.value.code == 2