"""Entry point: python -m consolecolor"""

from consolecolor.cli import main

if __name__ == "__main__":
    main()
