"""Per-session workspaces holding a user's appointments and prescriptions."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional

from records import AppointmentStore, PrescriptionStore
from records.seed import sample_appointments, sample_prescriptions

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKSPACES = 500


@dataclass
class Workspace:
    """The record lists a single browser session works on."""

    appointments: AppointmentStore = field(default_factory=AppointmentStore)
    prescriptions: PrescriptionStore = field(default_factory=PrescriptionStore)

    @classmethod
    def seeded(cls) -> "Workspace":
        return cls(
            appointments=AppointmentStore(sample_appointments()),
            prescriptions=PrescriptionStore(sample_prescriptions()),
        )


class WorkspaceRegistry:
    """Process-local map from session key to workspace.

    Workspaces are created lazily and kept in least-recently-used order. Once
    more than ``max_workspaces`` exist the stalest one is dropped, so sessions
    abandoned without signing out do not pile up. Nothing is written to disk.
    """

    def __init__(self, *, seed: bool = True, max_workspaces: int = DEFAULT_MAX_WORKSPACES) -> None:
        if max_workspaces < 1:
            raise ValueError("max_workspaces must be at least 1")
        self._seed = seed
        self._max_workspaces = max_workspaces
        self._workspaces: "OrderedDict[str, Workspace]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Workspace:
        if not key:
            raise ValueError("workspace key must be provided")
        with self._lock:
            workspace = self._workspaces.get(key)
            if workspace is not None:
                self._workspaces.move_to_end(key)
                return workspace
            workspace = Workspace.seeded() if self._seed else Workspace()
            self._workspaces[key] = workspace
            logger.info("Created workspace %s (seeded=%s)", key, self._seed)
            while len(self._workspaces) > self._max_workspaces:
                evicted, _ = self._workspaces.popitem(last=False)
                logger.info("Evicted idle workspace %s", evicted)
            return workspace

    def discard(self, key: Optional[str]) -> bool:
        if not key:
            return False
        with self._lock:
            removed = self._workspaces.pop(key, None)
        if removed is not None:
            logger.info("Discarded workspace %s", key)
        return removed is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._workspaces)
