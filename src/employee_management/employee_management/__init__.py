"""Employee Management package.

This package keeps an in-memory registry of employee records, organized as a
storage repository, a registry service with the use cases, and a small report
layer used by the demo script.
"""
