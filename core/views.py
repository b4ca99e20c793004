# core/views.py
import logging

from drf_spectacular.utils import OpenApiExample, extend_schema, inline_serializer
from rest_framework import permissions, serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import MISSING_FIELDS_MESSAGE
from .leaderboard import LEADERBOARD_SIZE, rank_rows
from .serializers import LeaderboardEntrySerializer, ScoreSubmissionSerializer
from .sheets import sheets_store

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = 'Failed to save score. Please try again.'
FETCH_FAILED_MESSAGE = 'Failed to fetch leaderboard'

ErrorResponse = inline_serializer(
    name='ErrorResponse',
    fields={
        'success': serializers.BooleanField(default=False),
        'error': serializers.CharField(),
    },
)


def error_response(message, status_code):
    return Response({'success': False, 'error': message}, status=status_code)


@extend_schema(
    request=ScoreSubmissionSerializer,
    responses={
        200: inline_serializer(
            name='SubmitScoreResponse',
            fields={'success': serializers.BooleanField(default=True)},
        ),
        400: ErrorResponse,
        500: ErrorResponse,
    },
    examples=[
        OpenApiExample(
            'Score Submission Example',
            value={
                "firstName": "Ada",
                "lastName": "Lovelace",
                "company": "Analytical Engines",
                "email": "ada@example.com",
                "displayName": "ada",
                "score": 420,
                "communicationOptIn": True,
            },
            request_only=True,
        ),
    ],
)
class SubmitScoreView(APIView):
    """
    API endpoint to submit a new score.
    Each valid submission is appended as one row to the spreadsheet.
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request, format=None):
        serializer = ScoreSubmissionSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(MISSING_FIELDS_MESSAGE, status.HTTP_400_BAD_REQUEST)

        submission = serializer.save()
        # Any failure past validation is reported generically; details go to the log.
        try:
            sheets_store.append_row(submission.to_row())
        except Exception:
            logger.exception("Error saving score")
            return error_response(SAVE_FAILED_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info("Score saved: %s", submission)
        return Response({'success': True}, status=status.HTTP_200_OK)


@extend_schema(
    responses={
        200: inline_serializer(
            name='LeaderboardResponse',
            fields={
                'success': serializers.BooleanField(default=True),
                'leaderboard': LeaderboardEntrySerializer(many=True),
            },
        ),
        500: ErrorResponse,
    },
    examples=[
        OpenApiExample(
            'Leaderboard Example',
            value={
                "success": True,
                "leaderboard": [
                    {"firstName": "Alice", "lastName": "Smith", "company": "Acme", "displayName": "alice", "score": 90},
                    {"firstName": "Bob", "lastName": "Jones", "company": "Initech", "displayName": "", "score": 50},
                    # ... up to 10 entries
                ],
            },
            response_only=True,
        ),
    ],
)
class LeaderboardView(APIView):
    """
    API endpoint to retrieve the top scores.

    Every request reads the whole sheet and ranks it again; nothing is cached.
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request, format=None):
        try:
            rows = sheets_store.read_rows()
            entries = rank_rows(rows, limit=LEADERBOARD_SIZE)
            leaderboard = LeaderboardEntrySerializer(entries, many=True).data
        except Exception:
            logger.exception("Error fetching leaderboard")
            return error_response(FETCH_FAILED_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            {'success': True, 'leaderboard': leaderboard},
            status=status.HTTP_200_OK,
        )
