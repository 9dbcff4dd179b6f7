"""Courses and assignments REST service."""
