"""Dayflow HR package.

Organised by feature modules (users, sessions, attendance, leave, payroll)
on top of a small record store, with a thin Flask controller layer.
"""
