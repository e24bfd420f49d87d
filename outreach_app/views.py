# outreach_app/views.py
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .apps import get_store
from .serializers import (
    VALIDATION_FAILED_MESSAGE,
    ProjectSerializer,
    ProjectStatsSerializer,
    ProjectWriteSerializer,
    SuggestionRequestSerializer,
    SuggestionSerializer,
)
from .suggestions import SuggestionError, suggest_project_details

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = 'Proyecto no encontrado.'
SUGGESTION_FAILED_MESSAGE = 'No se pudieron obtener sugerencias de la IA. Por favor, inténtalo de nuevo.'


def _validation_error(serializer):
    return Response(
        {'errors': serializer.errors, 'message': VALIDATION_FAILED_MESSAGE},
        status=status.HTTP_400_BAD_REQUEST
    )


def _not_found():
    return Response({'error': NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)


class ProjectListCreateView(APIView):
    """
    GET: list projects, newest first, or search them with ``?query=``.
    POST: validate and create a project.
    """

    def get(self, request):
        query = request.query_params.get('query')
        projects = get_store().list(query)
        return Response(ProjectSerializer(projects, many=True).data)

    def post(self, request):
        serializer = ProjectWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_error(serializer)
        project = get_store().create(serializer.validated_data)
        return Response(ProjectSerializer(project).data, status=status.HTTP_201_CREATED)


class ProjectDetailView(APIView):
    """
    GET: retrieve one project.
    PUT: replace the editable fields (full validation); omitted optional
         fields are cleared.
    PATCH: change only the given fields.
    DELETE: remove the project.
    """

    def get(self, request, project_id):
        project = get_store().get_by_id(project_id)
        if project is None:
            return _not_found()
        return Response(ProjectSerializer(project).data)

    def put(self, request, project_id):
        return self._update(request, project_id, partial=False)

    def patch(self, request, project_id):
        return self._update(request, project_id, partial=True)

    def delete(self, request, project_id):
        if not get_store().delete(project_id):
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, request, project_id, partial):
        serializer = ProjectWriteSerializer(data=request.data, partial=partial)
        if not serializer.is_valid():
            return _validation_error(serializer)
        changes = dict(serializer.validated_data)
        if not partial:
            for name, field in serializer.fields.items():
                if not field.required:
                    changes.setdefault(name, None)
        project = get_store().update(project_id, changes)
        if project is None:
            return _not_found()
        return Response(ProjectSerializer(project).data)


class ProjectStatsView(APIView):
    """GET: project counts by status."""

    def get(self, request):
        stats = get_store().stats()
        return Response(ProjectStatsSerializer(stats).data)


class RecentProjectsView(APIView):
    """GET: the ``?count=`` most recently created projects (default 3)."""

    def get(self, request):
        raw_count = request.query_params.get('count', '3')
        try:
            count = int(raw_count)
        except ValueError:
            count = -1
        if count < 0:
            return Response(
                {'errors': {'count': ['Debe ser un número entero no negativo.']}},
                status=status.HTTP_400_BAD_REQUEST
            )
        projects = get_store().recent(count)
        return Response(ProjectSerializer(projects, many=True).data)


class SuggestProjectDetailsView(APIView):
    """POST: ask the AI model for type, public objective and scope from a description."""

    def post(self, request):
        serializer = SuggestionRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_error(serializer)
        try:
            suggestion = suggest_project_details(serializer.validated_data['description'])
        except SuggestionError as e:
            logger.exception("AI suggestion failed: %s", e)
            return Response({'error': SUGGESTION_FAILED_MESSAGE}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(SuggestionSerializer(suggestion).data)
