"""
Notification dispatcher exercise: a monolithic LegacyNotifier and its
Strategy (formatting) + Observer (delivery channels) refactoring.
"""
