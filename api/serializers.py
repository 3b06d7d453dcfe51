"""
Serializers for API requests and responses.
"""
from rest_framework import serializers


class CommandSerializer(serializers.Serializer):
    """Serializer for a single command line."""
    line = serializers.CharField(allow_blank=True, trim_whitespace=False)


class BatchCommandSerializer(serializers.Serializer):
    """Serializer for a batch of command lines."""
    lines = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        allow_empty=False
    )


class CommandResponseSerializer(serializers.Serializer):
    """Serializer for command responses."""
    lines = serializers.ListField(child=serializers.CharField())
    terminated = serializers.BooleanField()


class BatchResponseSerializer(CommandResponseSerializer):
    """Serializer for batch responses."""
    processed = serializers.IntegerField()


class SessionStatusSerializer(serializers.Serializer):
    """Serializer for session status responses."""
    transaction_depth = serializers.IntegerField()
    keys = serializers.IntegerField()
    terminated = serializers.BooleanField()
