"""Emociograma category database model."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class EmociogramaCategory(BaseMutableModel):
    """Emotion category offered on check-ins.

    Fields:
        name: Display name
        slug: Unique key derived from the name (duplicate detection)
        description: Optional text
        icon: Emoji or icon name
        display_order: Position in pickers (indexed)
        is_active: Selectable for new submissions (indexed)
    """

    __tablename__ = "emociograma_categories"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, index=True
    )
