"""Mess Attendance package.

Tracks which meals each resident will take on a given day, enforces the
marking deadline and advance window, and aggregates mess cuts for admins.
Organized by feature modules (attendance, reports, users) with a thin Flask
controller layer over service/repository layers.
"""
