"""Barber Timeclock package.

Feature modules (timeclock, reports, ...) keep the shift engine pure; services
sit on top of repository protocols and are wired in ``container``.
"""
