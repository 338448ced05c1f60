"""Award Payroll package.

This package is organized by feature modules (employees, shifts, payroll, ...)
with a thin Flask controller layer over pure calculation and repository layers.
"""
