"""
Support functions that are independent from other parts of sessionctl.
"""
