import pytest

from Main import main, prompt_float, run_console
from Entities.Request import RequestStatus, RequestType
from utils.Helpers import parse_float, parse_int


def scripted(*answers):
    it = iter(answers)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def test_parse_float_rejects_garbage():
    assert parse_float(" 12.5 ") == 12.5
    with pytest.raises(ValueError, match="latitude must be a number"):
        parse_float("north", "latitude")
    with pytest.raises(ValueError, match="finite"):
        parse_float("nan", "liters")


def test_parse_int_rejects_garbage():
    assert parse_int("4") == 4
    with pytest.raises(ValueError, match="whole number"):
        parse_int("4.5", "request id")


def test_prompt_float_reprompts(capsys):
    assert prompt_float(scripted("abc", "", "1.25"), "Lat: ", "latitude") == 1.25
    out = capsys.readouterr().out
    assert out.count("Invalid input") == 2


def test_console_create_fuel_and_resolve(svc, capsys):
    run_console(svc, scripted(
        "1", "fuel", "KA01", "Swift", "Petrol", "12.9715", "oops", "77.5905", "5",
        "4", "1",
        "0",
    ))
    r = svc.db.history[0]
    assert r.type == RequestType.FUEL
    assert r.litersNeeded == 5.0
    assert r.assignedHelperId == "H2"
    assert r.status == RequestStatus.RESOLVED
    assert capsys.readouterr().out.rstrip().endswith("Goodbye!")


def test_console_unknown_type_is_breakdown(svc):
    run_console(svc, scripted("1", "flat tyre", "R", "M", "Diesel", "0", "0", "0"))
    r = svc.db.history[0]
    assert r.type == RequestType.BREAKDOWN
    assert r.litersNeeded == 0.0


def test_console_menu_errors(svc, capsys):
    run_console(svc, scripted("x", "9", "2", "3"))
    out = capsys.readouterr().out
    assert "Invalid choice." in out
    assert "FuelBuddy (FUEL) @ (12.9720, 77.5900) r=4.2" in out
    assert "=== Request History ===" in out
    assert out.rstrip().endswith("Goodbye!")


def test_main_loads_helpers_and_exports(tmp_path, monkeypatch):
    helpers = tmp_path / "helpers.csv"
    helpers.write_text("id,name,capability,lat,lon,rating\nM9,Nine,MECHANIC,0,0,5\n")
    out_csv = tmp_path / "history.csv"

    answers = iter(["1", "BREAKDOWN", "R", "M", "Diesel", "1", "1", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    main(["--helpers", str(helpers), "--export", str(out_csv)])

    text = out_csv.read_text()
    assert text.splitlines()[0].startswith("id,type,regNo")
    assert "M9" in text and "Nine" in text
