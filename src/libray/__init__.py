"""
libray: vector math, ray-sphere intersection, shading and ballistics
for producing small raster images.
"""
__version__ = "0.1.0"
