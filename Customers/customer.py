"""Customer model."""
from pydantic import BaseModel, Field, field_validator


class Customer(BaseModel):
    """Hotel customer, identified by a caller-assigned integer id."""

    id: int = Field(gt=0, frozen=True)
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        """
        Strip and validate the display name.

        Args:
            value: Input name string.

        Returns:
            The stripped name.

        Raises:
            ValueError: If nothing but whitespace was supplied.
        """
        stripped = value.strip()
        if not stripped:
            raise ValueError("Customer name must not be blank.")
        return stripped

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            }
