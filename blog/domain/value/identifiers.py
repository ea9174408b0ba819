"""Strongly typed identifiers for blog domain entities.

Using NewType for strong typing prevents mixing up post and tag IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
TagId = NewType("TagId", UUID)
