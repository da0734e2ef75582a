"""
Logging and metrics for the record codecs.
"""
