from pathlib import Path
import sys

# Ensure project root on sys.path for direct script execution
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from classgrid.cli.main import run_pipeline


def main() -> None:
    csv, validation, status = run_pipeline(root)
    print(csv)
    print(validation)
    print(status)


if __name__ == "__main__":
    # The Typer app is available via `python -m classgrid.cli.main` too.
    main()
