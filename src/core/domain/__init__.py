"""Person records, their value objects and the address book holding them.

Nothing here reads files or parses command text.
"""
