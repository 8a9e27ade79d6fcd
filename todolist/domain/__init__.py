"""Domain layer for todolist.

Pure models and functions only (no I/O, no side effects).
"""
