"""
Static reference data shipped with the navigator.
"""
