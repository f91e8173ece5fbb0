from rest_framework import serializers
from .models import JobAlert


class JobAlertSerializer(serializers.ModelSerializer):
    keywords = serializers.ListField(child=serializers.CharField(), required=False)
    industries = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = JobAlert
        fields = [
            'id', 'name', 'keywords', 'location', 'job_type', 'min_salary', 'max_salary',
            'experience_level', 'remote', 'industries', 'notify_email', 'notify_sms',
            'frequency', 'is_active', 'last_notified', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'last_notified', 'created_at', 'updated_at']

    def validate(self, attrs):
        min_salary = attrs.get('min_salary', getattr(self.instance, 'min_salary', None))
        max_salary = attrs.get('max_salary', getattr(self.instance, 'max_salary', None))
        if min_salary is not None and max_salary is not None and min_salary > max_salary:
            raise serializers.ValidationError({'max_salary': ["Maximum salary must be at least the minimum salary"]})
        return attrs
