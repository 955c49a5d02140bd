"""
Code-point and encoding helpers.
"""
