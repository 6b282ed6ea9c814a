"""
Shared Kernel

Building blocks reused by every ShareIt app: domain errors and value
objects, the unit of work and the HTTP glue (caller identification,
error mapping and request logging).
"""
