"""Items app package.

Items are the things users lend to each other. Each item has an owner,
a name, a description and an availability flag; only available items can
be booked. Booking history (last/next booking) and comments are attached
to an item when it is shown to its owner.
"""
