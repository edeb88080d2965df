"""Student Portal package.

This package is organized by feature modules (students, attendance, marks, ...)
with a thin Flask controller layer and service/repository layers over the
records backend's JSON API.
"""
from __future__ import annotations
