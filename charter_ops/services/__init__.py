"""
Coordinators combining the decision rules with the backing store
"""
