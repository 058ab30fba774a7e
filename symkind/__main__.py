"""Run symkind as Python module."""

import symkind.main

if __name__ == "__main__":
    # The ``prog`` needs to be set in the argparse.
    # Otherwise the program name in the help shown to the user will be ``__main__``.
    symkind.main.main()
