"""Workforce Admin Console package.

This package is organized by feature modules (employees, shifts, time tracking,
notifications, reports, ...) with a thin Flask controller layer on top of
service/repository layers backed by a generic data gateway.
"""
