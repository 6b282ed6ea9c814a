"""Item requests app package.

A user who cannot find an item asks for it here. Owners answer by
listing a new item that points at the request.
"""
