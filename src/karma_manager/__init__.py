"""Karma Manager package.

This package is organized by feature modules (attendance, people, reports, ...)
with a thin Flask controller layer over service/repository layers.
"""
