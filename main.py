# Main.py
""""" Terminal entry point for the calculation engine.

   Responsibilities:
   - Verify required files exist in development mode
   - Load configuration and set up logging
   - Read expressions line by line and print the engine's result

"""""
import sys
import pyperclip
from pathlib import Path
from CalcEngine import config_manager as config_manager
from CalcEngine.CalculatorModel import CalculatorModel
from CalcEngine.Lexer import is_identifier
from CalcEngine.logging_config import configure_logging


PROJECT_ROOT = Path(__file__).resolve().parent

HELP = (
    "Enter an expression, or one of:\n"
    "  AC               clear the display\n"
    "  back / ←         remove the last character\n"
    "  set <name> <n>   assign a variable\n"
    "  vars             list variables\n"
    "  reset            clear all variables\n"
    "  decimals <n>     set and save the number of decimal places\n"
    "  copy             copy the result to the clipboard\n"
    "  q                quit"
)


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
    """

    modules_dir = PROJECT_ROOT / "CalcEngine"

    REQUIRED = [
        modules_dir / "MathEngine.py",
        modules_dir / "Lexer.py",
        modules_dir / "Parser.py",
        modules_dir / "config_manager.py",
        config_manager.config_json,
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def handle_line(model, display, line):
    """Apply one line of input to the display.

    Returns:
        (new_display, message) where message is printed as-is when not None.
    """
    command = line.strip()
    variables = model.session.variables

    if command == "AC":
        return model.operate(display, "AC"), None

    if command in ("back", "←"):
        return model.operate(display, "←"), None

    if command == "copy":
        try:
            pyperclip.copy(display)
        except pyperclip.PyperclipException as e:
            return display, f"Clipboard not available: {e}"
        return display, "Copied."

    if command == "vars":
        if not len(variables):
            return display, "No variables set."
        return display, "\n".join(f"{name} = {value:g}" for name, value in variables.items())

    if command == "reset":
        variables.reset()
        return display, "Variables cleared."

    if command == "decimals" or command.startswith("decimals "):
        parts = command.split()
        try:
            decimal_places = int(parts[1])
        except (IndexError, ValueError):
            return display, "Usage: decimals <whole number>"
        if decimal_places < 0:
            return display, "Usage: decimals <whole number>"

        model.session.decimal_places = decimal_places
        all_settings = config_manager.load_setting_value("all")
        all_settings["decimal_places"] = decimal_places
        if not config_manager.save_setting(all_settings):
            return display, f"Decimal places set to {decimal_places} (not saved)."
        return display, f"Decimal places set to {decimal_places}."

    if command.startswith("set "):
        parts = command.split()
        try:
            name, value = parts[1], float(parts[2])
        except (IndexError, ValueError):
            return display, "Usage: set <name> <number>"
        if not is_identifier(name):
            return display, f"Invalid variable name: {name}"
        variables.set(name, value)
        return display, f"{name} = {value:g}"

    return model.operate(command, "="), None


def main(argv=None):

    """
    Load configuration and run the read/evaluate loop.
    - Keep this thin: no business logic here.
    """

    argv = sys.argv[1:] if argv is None else argv
    configure_logging(config_manager.load_setting_value("log_level"))
    model = CalculatorModel()

    # Expressions given as arguments are evaluated once, without the prompt
    if argv:
        print(model.operate(" ".join(argv), "="))
        return 0

    print(HELP)
    display = "0"
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip().lower() == "q":
            break

        display, message = handle_line(model, display, line)
        if message is not None:
            print(message)
        else:
            print("= " + display)
    return 0


if __name__ == "__main__":
    check_files_exist()
    sys.exit(main())
