"""
Abacus: an interactive calculator with variables and builtin functions.
"""
