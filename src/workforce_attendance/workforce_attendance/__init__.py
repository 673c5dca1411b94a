"""Workforce attendance package.

This package is organized by feature modules (timelogs, schedules, workshifts, ...)
with a thin Flask controller layer and service/repository layers around the
work-shift inference engine.
"""
