"""
Pydantic schema definitions for stored records.

Each entity (books, authors, categories) defines its record model, the
field policy used by its store and its seed rows.  Every field is
optional: incomplete payloads are accepted and fields never supplied
stay absent from responses.
"""
