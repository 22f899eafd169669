"""Church Attendance package.

This package is organized by feature modules (users, churches, structure,
students, attendance, stats, ...) with a thin Flask controller layer on top of
service/repository layers.
"""
