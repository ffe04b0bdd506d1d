"""In-memory state for one run of the program."""

from dataclasses import dataclass, field

from .models import PreferenceRecord
from .suggestions import Suggestion


@dataclass
class Session:
    """Who is signed in, plus what the current screen needs to hand on.

    Built once after the identity lookup succeeds and passed to every
    menu handler. Nothing here is persisted.
    """

    identifier: str
    access_token: str
    display_name: str
    pending: Suggestion | None = None
    records: list[PreferenceRecord] = field(default_factory=list)

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks
        return f"Session(identifier='{self.identifier}', display_name='{self.display_name}')"

    @property
    def choice_ids(self) -> list[int]:
        return [r.choice_id for r in self.records]
