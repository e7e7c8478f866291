"""
Models package for the Object Pool Simulator.
Contains the resource handle and the bounded resource pool.
"""
