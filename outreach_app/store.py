# outreach_app/store.py
import dataclasses
import datetime
import logging
import time
import uuid
from collections import Counter
from operator import attrgetter
from typing import Dict, List, Optional

from django.utils import timezone

from .models import EDITABLE_FIELDS, MANAGED_FIELDS, SEARCH_FIELDS, Project, ProjectStats, ProjectStatus
from .seed import seed_records

logger = logging.getLogger(__name__)


class ProjectStore:
    """
    In-memory collection of Project records.

    The store owns an ordered mapping of id -> Project, newest insert first.
    Every read hands out copies, so callers cannot change stored state
    without going through update().

    Args:
        clock: callable returning an aware datetime, defaults to timezone.now.
        delay (float): seconds slept before each operation to simulate a
            remote backend. Zero disables it.
    """

    def __init__(self, clock=None, delay=0):
        self._projects: Dict[str, Project] = {}
        self._clock = clock or timezone.now
        self._last_tick: Optional[datetime.datetime] = None
        self.delay = delay

    @classmethod
    def seeded(cls, clock=None, delay=0):
        """Build a store pre-loaded with the demo projects."""
        store = cls(clock=clock, delay=delay)
        now = store._clock()
        for data in seed_records(now):
            project = Project(**data)
            store._projects[project.id] = project
            store._last_tick = max(filter(None, (store._last_tick, project.created_at, project.updated_at)))
        logger.info("Seeded project store with %d projects", len(store._projects))
        return store

    def __len__(self):
        return len(self._projects)

    def _wait(self):
        if self.delay:
            time.sleep(self.delay)

    def _now(self, after=None):
        # Timestamps handed out by one store never repeat or go backwards,
        # even if the clock does.
        now = self._clock()
        floor = max(filter(None, (self._last_tick, after)), default=None)
        if floor is not None and now <= floor:
            now = floor + datetime.timedelta(microseconds=1)
        self._last_tick = now
        return now

    def list(self, query: Optional[str] = None) -> List[Project]:
        """
        Return projects matching ``query``.

        Without a query every project is returned, newest first. With one,
        projects whose searchable fields contain it (case-insensitive) are
        returned in stored order.
        """
        self._wait()
        if query:
            needle = query.lower()
            return [
                dataclasses.replace(p)
                for p in self._projects.values()
                if any(needle in (getattr(p, name) or '').lower() for name in SEARCH_FIELDS)
            ]
        return self._newest_first()

    def get_by_id(self, project_id: str) -> Optional[Project]:
        self._wait()
        project = self._projects.get(project_id)
        if project is None:
            logger.debug("Project %s not found", project_id)
            return None
        return dataclasses.replace(project)

    def create(self, data) -> Project:
        self._wait()
        values = {k: v for k, v in data.items() if k not in MANAGED_FIELDS}
        now = self._now()
        project = Project(id=self._new_id(), created_at=now, updated_at=now, **values)
        # Prepend: stored order is newest insert first.
        self._projects = {project.id: project, **self._projects}
        logger.info("Created project %s (%s)", project.id, project.project_name)
        return dataclasses.replace(project)

    def update(self, project_id: str, partial) -> Optional[Project]:
        self._wait()
        project = self._projects.get(project_id)
        if project is None:
            logger.debug("Update skipped, project %s not found", project_id)
            return None

        changes = {k: v for k, v in partial.items() if k not in MANAGED_FIELDS}
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise TypeError(f"Unknown project fields: {', '.join(sorted(unknown))}")

        updated = dataclasses.replace(project, updated_at=self._now(after=project.updated_at), **changes)
        self._projects[project_id] = updated
        logger.info("Updated project %s fields=%s", project_id, sorted(changes))
        return dataclasses.replace(updated)

    def delete(self, project_id: str) -> bool:
        self._wait()
        if self._projects.pop(project_id, None) is None:
            logger.debug("Delete skipped, project %s not found", project_id)
            return False
        logger.info("Deleted project %s", project_id)
        return True

    def stats(self) -> ProjectStats:
        self._wait()
        counts = Counter(str(project.status) for project in self._projects.values())
        return ProjectStats(
            total=len(self._projects),
            planning=counts[ProjectStatus.PLANNING.value],
            in_progress=counts[ProjectStatus.IN_PROGRESS.value],
            completed=counts[ProjectStatus.COMPLETED.value],
            on_hold=counts[ProjectStatus.ON_HOLD.value],
        )

    def recent(self, n: int = 3) -> List[Project]:
        self._wait()
        if n <= 0:
            return []
        return self._newest_first()[:n]

    def _newest_first(self):
        ordered = sorted(self._projects.values(), key=attrgetter('created_at'), reverse=True)
        return [dataclasses.replace(p) for p in ordered]

    def _new_id(self):
        project_id = uuid.uuid4().hex
        while project_id in self._projects:
            project_id = uuid.uuid4().hex
        return project_id
