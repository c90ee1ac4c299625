"""ID generators for casework."""

import uuid

from casework.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not sequential or ordered in any way. Identifiers are returned
    in canonical form (lowercase, hyphenated), the same form
    `casework.domain.parsing.parse_identifier` produces.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())
