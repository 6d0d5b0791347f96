"""
Campus occupancy forecasting.
"""
