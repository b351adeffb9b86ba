"""HRMS Payroll package.

This package is organized by feature modules (compensation, statutory, attendance,
payroll, ...) with a thin Flask controller layer on top of pure calculation
services and repository interfaces.
"""
