"""
models/ - Domain Models
=======================
Plain dataclasses that carry table rows between the layers.
"""
