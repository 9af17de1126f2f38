import sys
from boats_registry import BoatsRegistry
from errors import CapacityExceeded, FileOpenError, NotFound, OverpaymentRejected, ParseError
from misc import log


MENU_PROMPT = "(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it : "
BOAT_DATA_PROMPT = "Please enter the boat data in CSV format                 : "
BOAT_NAME_PROMPT = "Please enter the boat name                               : "
PAYMENT_PROMPT = "Please enter the amount to be paid                       : "


def welcome_message() -> None:
    print("\nWelcome to the Boat Management System")
    print("-------------------------------------\n")


def exit_message() -> None:
    print("\nExiting the Boat Management System\n")


def get_menu_choice() -> str:
    """Prompt for a command and return its first non-blank character.

    Blank lines are skipped and the prompt repeated. Returns "x" at end
    of input so that a closed stdin ends the session like the exit command.
    """
    answer = ""
    while not answer:
        try:
            answer = input(MENU_PROMPT).strip()
        except EOFError:
            return "x"
    return answer[:1]


def print_inventory(registry: BoatsRegistry) -> None:
    for line in registry.inventory():
        print(line)
    print()


def add_boat(registry: BoatsRegistry) -> None:
    if registry.is_full():
        print("Marina is full\n")
        return
    try:
        registry.add_boat(input(BOAT_DATA_PROMPT))
    except CapacityExceeded:
        print("Marina is full\n")
        return
    except ParseError as e:
        log(f"Rejected boat data: {e}")
    print()


def remove_boat(registry: BoatsRegistry) -> None:
    try:
        registry.remove_boat(input(BOAT_NAME_PROMPT).lstrip())
    except NotFound:
        print("No boat with that name\n")
        return
    print()


def make_payment(registry: BoatsRegistry) -> None:
    name = input(BOAT_NAME_PROMPT).lstrip()
    if not registry.has_boat(name):
        print("No boat with that name\n")
        return
    try:
        amount = float(input(PAYMENT_PROMPT))
    except ValueError:
        print("Invalid amount\n")
        return
    try:
        registry.make_payment(name, amount)
    except OverpaymentRejected as e:
        print(f"That is more than the amount owed, ${e.amount_owed:.2f}\n")
        return
    print()


def update_month(registry: BoatsRegistry) -> None:
    registry.accrue_monthly_charges()
    print()


def save_and_exit(registry: BoatsRegistry, path: str) -> None:
    exit_message()
    try:
        registry.save(path)
    except FileOpenError as e:
        print(f"Error opening file for writing: {e}", file=sys.stderr)
        log(f"Could not save boats: {e}")
    registry.clear()


def menu(registry: BoatsRegistry, path: str) -> None:
    """Interactive command loop driving the registry.

    Each command handles its own errors so the loop only ends on the exit
    command or at end of input, both of which save the registry to ``path``.

    Parameters
    ----------
    registry : BoatsRegistry
        Registry loaded at startup.
    path : str
        Data file the registry is saved to on exit.
    """
    while True:
        choice = get_menu_choice()
        try:
            match choice.lower():
                case "i":
                    print_inventory(registry)
                case "a":
                    add_boat(registry)
                case "r":
                    remove_boat(registry)
                case "p":
                    make_payment(registry)
                case "m":
                    update_month(registry)
                case "x":
                    save_and_exit(registry, path)
                    return
                case _:
                    print(f"Invalid option {choice}\n")
        except EOFError:
            # stdin closed in the middle of a command
            save_and_exit(registry, path)
            return


def main(argv: list[str] | None = None) -> int:
    """Entry point: ``boat-management <data_file>``.

    Returns the process exit status: 1 on a usage error or when the data
    file cannot be read, 0 otherwise.
    """
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print(f"Usage: {sys.argv[0]} <data_file>")
        return 1
    path = argv[0]

    registry = BoatsRegistry()
    try:
        registry.load(path)
    except FileOpenError as e:
        print(f"Error opening file: {e.cause.strerror or e.cause}", file=sys.stderr)
        log(f"Could not load boats: {e}")
        return 1

    log(f"Boat Management System started with {path}.")
    welcome_message()
    menu(registry, path)
    log("Boat Management System stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
