"""Strongly typed identifiers for stock board entities.

Post identifiers are assigned by the database (serial primary key).
"""

from typing import NewType

PostId = NewType("PostId", int)
