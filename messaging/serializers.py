from rest_framework import serializers


class SendSMSSerializer(serializers.Serializer):
    job_id = serializers.IntegerField(required=False, allow_null=True)
