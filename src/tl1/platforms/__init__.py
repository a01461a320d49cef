"""
Prebuilt command catalogs for specific network element platforms.
"""
