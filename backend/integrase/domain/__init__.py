"""
DOMAIN LAYER - records exchanged with the directory and the errors around them.
"""
