"""Email value object with validation.

Immutable value object that validates and normalizes email addresses.
Used wherever an address enters the system (magic link requests, user
creation) so lookups stay case-insensitive.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Validated, lowercased email address.

    Attributes:
        value: Normalized address.

    Raises:
        ValueError: If the address is not syntactically valid.

    Example:
        >>> Email("Ana.Souza@Example.COM").value
        'ana.souza@example.com'
        >>> Email("ana@example.com").masked()
        'a**@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the address.

        Raises:
            ValueError: If the address is invalid.
        """
        try:
            # Syntax only, no DNS lookup
            validated = validate_email(self.value.strip(), check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", validated.normalized.lower())

    @property
    def domain(self) -> str:
        """Domain part of the address."""
        return self.value.rsplit("@", 1)[1]

    def masked(self) -> str:
        """Address with the local part hidden, safe for logs.

        Returns:
            str: First character of the local part followed by ``**``.
        """
        local, domain = self.value.rsplit("@", 1)
        return f"{local[:1]}**@{domain}"

    def __str__(self) -> str:
        return self.value
