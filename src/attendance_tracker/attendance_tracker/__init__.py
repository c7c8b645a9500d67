"""Attendance Tracker package.

This package is organized by feature modules (employees, attendance,
holidays, reports) with a thin Flask JSON layer over service/repository layers.
"""
