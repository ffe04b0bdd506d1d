"""Dining preference model for saved suggestions."""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, local_now

# The INSTRUCTIONS column is a VARCHAR2(4000)
INSTRUCTIONS_MAX_LENGTH = 3999


class ChoiceKind(str, enum.Enum):
    """Where the user decided to eat."""

    EAT_IN = "eat_in"
    EAT_OUT = "eat_out"


class PreferenceRecord(Base):
    """One saved suggestion.

    eat_in rows carry dish_name, ingredients and instructions; eat_out rows
    carry location_name only. Rows are never updated in place.
    """

    __tablename__ = "dining_preferences"

    byu_id: Mapped[str] = mapped_column(String(9), primary_key=True)
    choice_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    choice: Mapped[ChoiceKind] = mapped_column(
        Enum(
            ChoiceKind,
            values_callable=lambda x: [e.value for e in x],
            native_enum=False,
            length=10,
        ),
        nullable=False,
    )
    time_stamp: Mapped[datetime] = mapped_column(
        DateTime, default=local_now, nullable=False
    )
    dish_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ingredients: Mapped[str | None] = mapped_column(Text, nullable=True)
    instructions: Mapped[str | None] = mapped_column(
        String(INSTRUCTIONS_MAX_LENGTH + 1), nullable=True
    )
    location_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    @property
    def is_recipe(self) -> bool:
        return self.choice is ChoiceKind.EAT_IN

    def __repr__(self) -> str:
        return (
            f"<PreferenceRecord(byu_id='{self.byu_id}', choice_id={self.choice_id}, "
            f"choice={self.choice.value})>"
        )
