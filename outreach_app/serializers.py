from rest_framework import serializers

from .models import ProjectStatus

VALIDATION_FAILED_MESSAGE = 'Falló la validación. Por favor revisa los campos.'


def _min_length(limit, message):
    return {'min_length': limit, 'error_messages': {'min_length': message}}


class ProjectWriteSerializer(serializers.Serializer):
    """Validates project fields coming from the create and edit forms."""
    project_name = serializers.CharField(
        **_min_length(3, 'El nombre del proyecto debe tener al menos 3 caracteres')
    )
    location = serializers.CharField(
        **_min_length(3, 'La ubicación debe tener al menos 3 caracteres')
    )
    responsible_department = serializers.CharField(
        **_min_length(3, 'El departamento/carrera responsable debe tener al menos 3 caracteres')
    )
    project_lead = serializers.CharField(
        **_min_length(5, 'El nombre del líder del proyecto (nombre y dos apellidos) debe tener al menos 5 caracteres.')
    )
    academic_tutor = serializers.CharField(
        **_min_length(5, 'El nombre del tutor académico (nombre y dos apellidos) debe tener al menos 5 caracteres.')
    )
    community_tutor = serializers.CharField(
        **_min_length(5, 'El nombre del tutor comunitario (nombre y dos apellidos) debe tener al menos 5 caracteres.')
    )
    contact_information = serializers.EmailField(
        error_messages={'invalid': 'Por favor, introduce un correo electrónico válido.'}
    )
    status = serializers.ChoiceField(
        choices=ProjectStatus.choices,
        error_messages={'invalid_choice': 'Por favor, selecciona un estado válido.'}
    )
    status_description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(
        **_min_length(10, 'La descripción debe tener al menos 10 caracteres')
    )
    project_type = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    public_objective = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    scope = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ProjectSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    project_name = serializers.CharField()
    location = serializers.CharField()
    responsible_department = serializers.CharField()
    project_lead = serializers.CharField()
    academic_tutor = serializers.CharField()
    community_tutor = serializers.CharField()
    contact_information = serializers.EmailField()
    status = serializers.ChoiceField(choices=ProjectStatus.choices)
    status_label = serializers.CharField(read_only=True)
    status_description = serializers.CharField(allow_null=True)
    description = serializers.CharField()
    project_type = serializers.CharField(allow_null=True)
    public_objective = serializers.CharField(allow_null=True)
    scope = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class ProjectStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    planning = serializers.IntegerField()
    in_progress = serializers.IntegerField()
    completed = serializers.IntegerField()
    on_hold = serializers.IntegerField()


class SuggestionRequestSerializer(serializers.Serializer):
    description = serializers.CharField(
        **_min_length(10, 'La descripción debe tener al menos 10 caracteres.')
    )


class SuggestionSerializer(serializers.Serializer):
    """Shape of the AI suggestion: type, public objective and scope."""
    project_type = serializers.CharField()
    public_objective = serializers.CharField()
    scope = serializers.CharField()
