from rest_framework import serializers
from users.validators import validate_resume_file
from .models import Job, Application


class JobSerializer(serializers.ModelSerializer):
    employer_id = serializers.IntegerField(read_only=True)
    views = serializers.SerializerMethodField()
    applicants_count = serializers.SerializerMethodField()
    company = serializers.CharField(max_length=255, required=False)
    requirements = serializers.ListField(child=serializers.CharField(), required=False)
    benefits = serializers.ListField(child=serializers.CharField(), required=False)
    skills = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = Job
        fields = [
            'id', 'employer_id', 'title', 'description', 'company', 'location',
            'salary', 'job_type', 'requirements', 'benefits', 'skills',
            'application_deadline', 'experience_level', 'remote',
            'views', 'applicants_count', 'created_at',
        ]
        read_only_fields = ['employer_id', 'views', 'applicants_count', 'created_at']

    def get_views(self, obj):
        value = getattr(obj, 'view_count', None)
        return value if value is not None else obj.job_views.count()

    def get_applicants_count(self, obj):
        value = getattr(obj, 'application_count', None)
        return value if value is not None else obj.applications.count()

    def validate(self, attrs):
        if not self.instance and not attrs.get('company'):
            employer = self.context['request'].user
            if not employer.company_name:
                raise serializers.ValidationError({'company': ["This field is required."]})
            attrs['company'] = employer.company_name
        return attrs


class ApplicationSerializer(serializers.ModelSerializer):
    job_id = serializers.IntegerField(read_only=True)
    seeker_id = serializers.IntegerField(read_only=True)
    job_title = serializers.CharField(source='job.title', read_only=True)
    resume_url = serializers.SerializerMethodField()

    class Meta:
        model = Application
        fields = [
            'id', 'job_id', 'seeker_id', 'job_title', 'resume_url', 'status',
            'cover_letter', 'interview_date', 'ats_score', 'applied_at',
        ]
        read_only_fields = fields

    def get_resume_url(self, obj):
        return obj.resume.url if obj.resume else None


class ApplicationDetailSerializer(ApplicationSerializer):
    """
    Employer-side view of an application with the candidate's details.
    """
    seeker_name = serializers.SerializerMethodField()
    phone_num = serializers.SerializerMethodField()

    class Meta(ApplicationSerializer.Meta):
        fields = ApplicationSerializer.Meta.fields + ['seeker_name', 'phone_num']
        read_only_fields = fields

    def get_seeker_name(self, obj):
        return obj.seeker.username if obj.seeker else "Unknown"

    def get_phone_num(self, obj):
        return (obj.seeker.phone if obj.seeker else None) or None


class ApplyToJobSerializer(serializers.Serializer):
    resume = serializers.FileField(
        validators=[validate_resume_file],
        error_messages={'required': "Resume file is required", 'null': "Resume file is required"},
    )
    cover_letter = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ApplicationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=Application.EMPLOYER_STATUSES,
        error_messages={'invalid_choice': "Invalid status", 'required': "Invalid status"},
    )


class InterviewScheduleSerializer(serializers.Serializer):
    interview_date = serializers.DateTimeField(
        error_messages={
            'required': "Interview date is required",
            'null': "Interview date is required",
            'invalid': "Invalid interview date",
        },
    )
