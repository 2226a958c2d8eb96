"""Attendance tracking per registration."""
