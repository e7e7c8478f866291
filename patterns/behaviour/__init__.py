"""
Behavioural pattern demos: Iterator, Observer, Strategy.
"""
