"""Punto de entrada para `python -m letter_trainer`."""

from .main import main


if __name__ == "__main__":
    raise SystemExit(main())
