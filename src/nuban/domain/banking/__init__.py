"""Banking domain package.

This package contains the NUBAN account model, the check digit algorithm
and the directory of Nigerian bank codes.
"""
