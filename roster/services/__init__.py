"""Services Layer — imperative shell orchestrating core rules and persistence.

Invariants:
    - Services call core/ for decisions and repositories for IO
"""
