# outreach_app/seed.py
import datetime

from .models import ProjectStatus

SEED_PROJECTS = [
    {
        'id': '1',
        'project_name': 'Community Garden Initiative',
        'location': 'Sector El Limón, Maracay',
        'responsible_department': 'Agricultural Engineering',
        'project_lead': 'José Pérez Rojas',
        'academic_tutor': 'Prof. Maria Silva',
        'community_tutor': 'Carlos Mendez Ortiz',
        'contact_information': 'j.perez@unefa.edu.ve',
        'status': ProjectStatus.IN_PROGRESS,
        'description': (
            'Development of a community garden to promote sustainable agriculture '
            'and provide fresh produce to local families.'
        ),
        'project_type': 'Agricultural Development',
        'public_objective': 'Improve food security and promote sustainable practices.',
        'scope': 'Establishment of garden plots, training workshops, and community outreach.',
        'created_days_ago': 10,
        'updated_days_ago': 2,
    },
    {
        'id': '2',
        'project_name': 'Digital Literacy Program for Seniors',
        'location': 'UNEFA Cagua Extension',
        'responsible_department': 'Systems Engineering',
        'project_lead': 'Andrea González Díaz',
        'academic_tutor': 'Prof. Ana Rodriguez',
        'community_tutor': 'Pedro Castillo Blanco',
        'contact_information': 'a.gonzalez@unefa.edu.ve',
        'status': ProjectStatus.PLANNING,
        'description': (
            'A program to teach basic computer and internet skills to senior '
            'citizens in the community.'
        ),
        'project_type': 'Educational Program',
        'public_objective': 'Enhance digital inclusion for seniors.',
        'scope': 'Weekly workshops, personalized assistance, and resource material development.',
        'created_days_ago': 5,
        'updated_days_ago': 1,
    },
    {
        'id': '3',
        'project_name': 'River Cleanup Campaign',
        'location': 'Turmero River Banks',
        'responsible_department': 'Civil Engineering & Environmental Science',
        'project_lead': 'Luis Fernandez Mora',
        'academic_tutor': 'Prof. Sofia Herrera',
        'community_tutor': 'Rosa Martinez Peña',
        'contact_information': 'cleanup@unefa.edu.ve',
        'status': ProjectStatus.COMPLETED,
        'description': (
            'Organized cleanup drives along the Turmero river to remove waste '
            'and raise environmental awareness.'
        ),
        'project_type': 'Environmental Conservation',
        'public_objective': (
            'Reduce river pollution and promote community involvement in '
            'environmental protection.'
        ),
        'scope': 'Three cleanup events, waste sorting and recycling, awareness talks in local schools.',
        'created_days_ago': 60,
        'updated_days_ago': 30,
    },
]


def seed_records(now):
    """Yield seed project field dicts with timestamps resolved against ``now``."""
    for item in SEED_PROJECTS:
        data = {k: v for k, v in item.items() if not k.endswith('_days_ago')}
        data['created_at'] = now - datetime.timedelta(days=item['created_days_ago'])
        data['updated_at'] = now - datetime.timedelta(days=item['updated_days_ago'])
        yield data
