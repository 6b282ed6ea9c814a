"""Users app package.

Stores the people who list and book items. A user is identified by an
id and carries a display name and a unique e-mail. Other apps reach
users through ``apps.users.directory.UserDirectory`` rather than the
ORM model.
"""
