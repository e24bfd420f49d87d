# outreach_app/suggestions.py
import json
import logging
from typing import Dict

import requests
from django.conf import settings

from .serializers import SuggestionSerializer

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """You are an AI assistant designed to suggest project details.

Based on the following project description, suggest a project type, a public objective, and a scope for the project.

Description: {description}

Please provide the suggestions in a structured format.
"""

RESPONSE_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'project_type': {
            'type': 'STRING',
            'description': 'Suggested project type based on the description.',
        },
        'public_objective': {
            'type': 'STRING',
            'description': 'Suggested public objective for the project.',
        },
        'scope': {
            'type': 'STRING',
            'description': 'Suggested scope of the project.',
        },
    },
    'required': ['project_type', 'public_objective', 'scope'],
}


class SuggestionError(Exception):
    """The model could not produce a usable suggestion."""


def build_prompt(description: str) -> str:
    return PROMPT_TEMPLATE.format(description=description)


def suggest_project_details(description: str) -> Dict[str, str]:
    """
    Ask the generative model for a project type, public objective and scope.

    Returns:
        dict with ``project_type``, ``public_objective`` and ``scope``.

    Raises:
        SuggestionError: on missing configuration, transport failure, a
            non-2xx response, or output that does not match the schema.
    """
    api_key = getattr(settings, 'GEMINI_API_KEY', '')
    if not api_key:
        raise SuggestionError("GEMINI_API_KEY is not configured")

    model = getattr(settings, 'GEMINI_MODEL', 'gemini-2.0-flash')
    base_url = getattr(settings, 'GEMINI_API_URL', 'https://generativelanguage.googleapis.com/v1beta')
    timeout = getattr(settings, 'GEMINI_TIMEOUT', 30)

    payload = {
        'contents': [{'parts': [{'text': build_prompt(description)}]}],
        'generationConfig': {
            'responseMimeType': 'application/json',
            'responseSchema': RESPONSE_SCHEMA,
        },
    }

    try:
        response = requests.post(
            f"{base_url}/models/{model}:generateContent",
            headers={'x-goog-api-key': api_key},
            json=payload,
            timeout=timeout,
        )
        response.raise_for_status()
        body = response.json()
    except requests.RequestException as e:
        logger.warning("Suggestion request to %s failed: %s", model, e)
        raise SuggestionError(str(e)) from e
    except ValueError as e:
        raise SuggestionError("Model response is not JSON") from e

    return _parse_suggestion(body)


def _parse_suggestion(body) -> Dict[str, str]:
    try:
        text = body['candidates'][0]['content']['parts'][0]['text']
        data = json.loads(text)
    except (KeyError, IndexError, TypeError, ValueError) as e:
        logger.error("Unexpected model response shape: %s", e)
        raise SuggestionError("Model returned no structured output") from e

    serializer = SuggestionSerializer(data=data)
    if not serializer.is_valid():
        logger.error("Model output failed validation: %s", serializer.errors)
        raise SuggestionError(f"Invalid suggestion: {serializer.errors}")
    return dict(serializer.validated_data)
