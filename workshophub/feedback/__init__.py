"""Participant feedback on workshops."""
