"""
Occupancy prediction module.
"""
