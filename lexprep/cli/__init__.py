"""
Terminal front end for LexPrep.
"""
