import datetime

import pytest
from django.apps import apps
from django.utils import timezone
from rest_framework.test import APIClient

from outreach_app.models import ProjectStatus
from outreach_app.store import ProjectStore


@pytest.fixture(autouse=True)
def app_store():
    """Fresh seeded process store for every test."""
    return apps.get_app_config('outreach_app').reset_store(seed=True)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def frozen_clock():
    instant = timezone.now().replace(microsecond=0)
    return lambda: instant


@pytest.fixture
def store():
    return ProjectStore.seeded()


@pytest.fixture
def empty_store():
    return ProjectStore()


@pytest.fixture
def project_data():
    return {
        "project_name": "Neighbourhood Reading Club",
        "location": "Barrio La Pica, Turmero",
        "responsible_department": "Education",
        "project_lead": "Daniela Torres Vega",
        "academic_tutor": "Prof. Jorge Rivas",
        "community_tutor": "Marta Suarez Leon",
        "contact_information": "d.torres@unefa.edu.ve",
        "status": ProjectStatus.PLANNING.value,
        "description": "Weekly reading sessions for children in the neighbourhood library.",
    }


@pytest.fixture
def past():
    return timezone.now() - datetime.timedelta(days=365)
