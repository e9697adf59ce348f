"""Entry point for `python -m calendarview`."""

from calendarview.cli import main

if __name__ == "__main__":
    main()
