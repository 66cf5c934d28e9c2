"""
Moonfilm Studio backend: quote builder, receipts and business settings.
"""
