"""Comments app package.

Renters leave comments on items they have finished borrowing.
"""
