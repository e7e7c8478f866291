"""
Analysis package for the Object Pool Simulator.
Contains the pool event log, run metrics and capacity comparison.
"""
