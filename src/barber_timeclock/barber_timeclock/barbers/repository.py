from __future__ import annotations

from typing import Mapping, Protocol


class BarberDirectory(Protocol):
    def get_display_names(self) -> Mapping[str, str]:
        """barber_id -> display name for every barber of the shop."""

        raise NotImplementedError
