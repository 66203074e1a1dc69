"""Short code generation utilities."""

import uuid


class ShortCodeGenerator:
    """Generate short codes for URLs.

    Codes are random UUID4 values in canonical form. The key space is large
    enough that collisions are not checked for.
    """

    def generate(self) -> str:
        """Generate a new random short code.

        Returns:
            Canonical UUID string (e.g. 1b4e28ba-2fa1-4d2b-883f-0016d3cca427)
        """
        return str(uuid.uuid4())
