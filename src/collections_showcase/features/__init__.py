"""Standalone language-feature demonstrations.

Modules:
    calculator: toy arithmetic with a division-by-zero guard
    delegation: explicit observable / vetoable value holders, cached values
    generics: generic container and type helpers
    builder: nested HTML builder using context managers
    inspection: value shape descriptions from explicit schema metadata
    timing: elapsed-time measurement helpers
"""
