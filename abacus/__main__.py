"""
This is an interactive calculator. Try:

    py -m abacus -h

for an explanation of the arguments.
"""
from .cmdline import main

main()
