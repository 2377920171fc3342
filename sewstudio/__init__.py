"""
Signature Sewing Studio.

Infers sewing parameters (fabric, needle, stitches, notions, difficulty) from
a garment type and size, and lays the result out as a printable PDF pattern
pack.
"""
