"""
Pure decision rules: phase classification and crew matching
"""
