"""
Command-line tools: format converter and record set comparer.
"""
