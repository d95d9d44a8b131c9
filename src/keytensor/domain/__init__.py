"""
Domain layer for keytensor: element types, errors, interfaces and dispatch
utilities. Nothing in this package imports NumPy.
"""
