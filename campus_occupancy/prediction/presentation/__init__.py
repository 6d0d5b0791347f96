"""
Presentation layer for the prediction module.
"""
