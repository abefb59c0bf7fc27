# Main.py
import argparse
from typing import Callable, Optional

from Store import DataStore
from Entities.location import Location
from Entities.Request import RequestType
from Entities.vehicle import Vehicle
from services import AssistanceService, ConsoleNotifier
from utils.Helpers import parse_float, parse_int

MENU = "\nOptions: 1=Create Request  2=List Helpers  3=History  4=Resolve  0=Exit"

InputFn = Callable[[str], str]


def prompt_text(input_fn: InputFn, prompt: str) -> str:
    return input_fn(prompt).strip()


def prompt_float(input_fn: InputFn, prompt: str, field: str) -> float:
    """Ask until the answer parses as a number."""
    while True:
        try:
            return parse_float(input_fn(prompt), field)
        except ValueError as e:
            print(f"Invalid input: {e}")


def prompt_int(input_fn: InputFn, prompt: str, field: str) -> int:
    while True:
        try:
            return parse_int(input_fn(prompt), field)
        except ValueError as e:
            print(f"Invalid input: {e}")


def create_from_console(svc: AssistanceService, input_fn: InputFn) -> None:
    t = prompt_text(input_fn, "Type (BREAKDOWN/FUEL): ").upper()
    # anything other than FUEL is treated as a breakdown
    req_type = RequestType.FUEL if t == "FUEL" else RequestType.BREAKDOWN

    reg = prompt_text(input_fn, "Vehicle regNo: ")
    model = prompt_text(input_fn, "Vehicle model: ")
    fuel = prompt_text(input_fn, "Fuel type (Petrol/Diesel): ")
    lat = prompt_float(input_fn, "Latitude: ", "latitude")
    lon = prompt_float(input_fn, "Longitude: ", "longitude")
    liters = 0.0
    if req_type == RequestType.FUEL:
        liters = prompt_float(input_fn, "Approx liters needed: ", "liters")

    svc.create_request(req_type, Vehicle(reg, model, fuel), Location(lat, lon), liters)


def run_console(svc: AssistanceService, input_fn: Optional[InputFn] = None) -> None:
    input_fn = input_fn or input
    print("Welcome to Onroad Assistance Helper (console prototype)")
    try:
        while True:
            print(MENU)
            try:
                ch = parse_int(input_fn("Choice: "), "choice")
            except ValueError:
                continue
            if ch == 0:
                break
            if ch == 1:
                create_from_console(svc, input_fn)
            elif ch == 2:
                print("Available helpers:")
                for h in svc.list_helpers():
                    print(h)
            elif ch == 3:
                svc.print_history()
            elif ch == 4:
                rid = prompt_int(input_fn, "Enter request id to resolve: ", "request id")
                svc.resolve_request(rid)
            else:
                print("Invalid choice.")
    except EOFError:
        pass
    print("Goodbye!")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Onroad assistance dispatch (console prototype).")
    ap.add_argument("--helpers", default=None, help="CSV with id,name,capability,lat,lon,rating columns.")
    ap.add_argument("--export", default=None, help="Write the request history to this CSV on exit.")
    args = ap.parse_args(argv)

    db = DataStore()
    if args.helpers:
        db.init_helpers(args.helpers)
    svc = AssistanceService(db, ConsoleNotifier())

    run_console(svc)

    if args.export:
        svc.history_frame().to_csv(args.export, index=False)
        print(f"Wrote {args.export}")


if __name__ == "__main__":
    main()
