from rest_framework import serializers


class TrackEventSerializer(serializers.Serializer):
    event = serializers.CharField(max_length=255)
    properties = serializers.DictField(required=False, default=dict)
