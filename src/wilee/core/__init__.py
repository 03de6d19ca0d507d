"""
The CORE layer contains the numeric primitives.
It has no knowledge of I/O; every object is built in memory and is
read-only once constructed.
"""
