"""Boarding Attendance package.

Feature modules (roster, attendance, scanner, report) sit behind a thin
Flask controller layer; services depend on repository protocols, not on
MySQL directly.
"""
