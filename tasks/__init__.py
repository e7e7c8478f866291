"""
Refactoring exercises.
"""
