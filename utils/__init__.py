"""
Utilities for the Object Pool Simulator: console/file logger and JSON scenario loading.
"""
