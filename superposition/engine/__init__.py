# Engine package for the Superposition algebra
"""
Combination and filtering engines.

Both engines scan the cross product of two operands and record an
explicit outcome for every visited pair.
"""
