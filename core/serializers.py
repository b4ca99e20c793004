# core/serializers.py
from rest_framework import serializers

from .exceptions import MISSING_FIELDS_MESSAGE, ValidationError
from .models import ScoreSubmission, is_present

# --- 1. Score Submission Serializer (For POSTing new scores) ---

def _value_field(**kwargs):
    return serializers.JSONField(required=False, allow_null=True, **kwargs)


class ScoreSubmissionSerializer(serializers.Serializer):
    """
    Presence checks only. Field names follow the client's JSON keys and any
    JSON value is accepted as-is. Failures all carry the same message.
    """
    firstName = _value_field()
    lastName = _value_field()
    company = _value_field()
    email = _value_field()
    displayName = _value_field(default='')
    # 0 and null are valid scores, only a missing key is not.
    score = _value_field()
    communicationOptIn = _value_field(default=False)

    REQUIRED_FIELDS = ('firstName', 'lastName', 'company', 'email')

    def validate(self, attrs):
        if not all(is_present(attrs.get(name)) for name in self.REQUIRED_FIELDS):
            raise ValidationError(MISSING_FIELDS_MESSAGE)
        if 'score' not in attrs:
            raise ValidationError(MISSING_FIELDS_MESSAGE)
        return attrs

    def create(self, validated_data):
        return ScoreSubmission(
            first_name=validated_data['firstName'],
            last_name=validated_data['lastName'],
            company=validated_data['company'],
            email=validated_data['email'],
            score=validated_data['score'],
            display_name=validated_data.get('displayName'),
            communication_opt_in=validated_data.get('communicationOptIn'),
        )

# --- 2. Leaderboard Data Serializer (For GETting spreadsheet data) ---

class LeaderboardEntrySerializer(serializers.Serializer):
    """
    Serializer for displaying leaderboard entries read back from the sheet.
    Has no email field.
    """
    firstName = serializers.CharField(source='first_name')
    lastName = serializers.CharField(source='last_name')
    company = serializers.CharField()
    displayName = serializers.CharField(source='display_name')
    score = serializers.IntegerField()
