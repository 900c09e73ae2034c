"""
Shared Kernel

Building blocks used by every app: the clock all temporal decisions go
through, the domain error taxonomy and its mapping onto API responses.
"""
