# outreach_app/models.py
import datetime
from dataclasses import dataclass, field, fields
from typing import Optional

from django.db import models


class ProjectStatus(models.TextChoices):
    PLANNING = 'Planning', 'Planificación'
    IN_PROGRESS = 'In Progress', 'En Progreso'
    COMPLETED = 'Completed', 'Completado'
    ON_HOLD = 'On Hold', 'En Espera'


@dataclass
class Project:
    """
    One community outreach initiative.

    Records live in the in-memory ProjectStore, not in a database table,
    so this is a plain dataclass rather than a Django model.
    """
    id: str
    project_name: str
    location: str
    responsible_department: str
    project_lead: str
    academic_tutor: str
    community_tutor: str
    contact_information: str
    status: str
    description: str
    created_at: datetime.datetime
    updated_at: datetime.datetime
    status_description: Optional[str] = None
    project_type: Optional[str] = None  # AI suggested
    public_objective: Optional[str] = None  # AI suggested
    scope: Optional[str] = None  # AI suggested

    @property
    def status_label(self):
        return ProjectStatus(self.status).label


# Fields the store owns; callers never write them directly.
MANAGED_FIELDS = frozenset({'id', 'created_at', 'updated_at'})
EDITABLE_FIELDS = frozenset(f.name for f in fields(Project)) - MANAGED_FIELDS

# Fields matched by a free-text project search.
SEARCH_FIELDS = (
    'project_name',
    'responsible_department',
    'location',
    'project_lead',
    'academic_tutor',
    'community_tutor',
)


@dataclass
class ProjectStats:
    total: int = 0
    planning: int = 0
    in_progress: int = 0
    completed: int = 0
    on_hold: int = 0
