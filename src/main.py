"""Main entry point for the todo note tools.

Run ``python src/main.py rename [PATH]`` or the installed ``todo`` script.
"""
from cli import main

if __name__ == "__main__":
    main()
