"""
Auth Service for the 254Carbon Access Layer.
"""
