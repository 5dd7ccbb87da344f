"""
Package entry point.

Allows running the application via:

    python -m timetable

This simply forwards execution to timetable.cli.main().
"""

from timetable.cli import main

if __name__ == "__main__":
    main()
