from rest_framework import serializers
from rest_framework.settings import api_settings
from django.contrib.auth import get_user_model
from django.contrib.auth.validators import UnicodeUsernameValidator

User = get_user_model()


class EducationSerializer(serializers.Serializer):
    school = serializers.CharField()
    degree = serializers.CharField()
    field_of_study = serializers.CharField()
    start_date = serializers.CharField()
    end_date = serializers.CharField(allow_blank=True, required=False, default='')


class ExperienceSerializer(serializers.Serializer):
    title = serializers.CharField()
    company = serializers.CharField()
    location = serializers.CharField(allow_blank=True, required=False, default='')
    start_date = serializers.CharField()
    end_date = serializers.CharField(allow_blank=True, required=False, default='')
    description = serializers.CharField(allow_blank=True, required=False, default='')


class SessionUserSerializer(serializers.ModelSerializer):
    """
    The minimal identity returned by register/login/user.
    """
    class Meta:
        model = User
        fields = ['id', 'email', 'role', 'username']


class UserSerializer(serializers.ModelSerializer):
    """
    Full profile: read by /auth/me, updated through PATCH /user.
    """
    education = EducationSerializer(many=True, required=False)
    experience = ExperienceSerializer(many=True, required=False)
    skills = serializers.ListField(child=serializers.CharField(), required=False)
    current_plan = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'username', 'role', 'phone', 'bio', 'location',
            'resume_url', 'education', 'experience', 'skills',
            'company_name', 'company_size', 'industry', 'founded', 'website',
            'company_description', 'benefits', 'culture', 'current_plan',
        ]
        read_only_fields = ['id', 'email', 'role', 'current_plan']
        # validate_username below owns the uniqueness message
        extra_kwargs = {'username': {'validators': [UnicodeUsernameValidator()]}}

    def validate_username(self, value):
        clash = User.objects.filter(username=value).exclude(pk=self.instance.pk if self.instance else None)
        if clash.exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def update(self, instance, validated_data):
        # education/experience are stored as plain JSON lists on the user
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        return instance


class RegistrationSerializer(serializers.Serializer):
    """
    Handles sign-up logic with Role Selection.
    """
    email = serializers.EmailField()
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, min_length=6)
    role = serializers.CharField()
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    company_name = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    REQUIRED = ('email', 'password', 'role', 'username')
    SELF_SERVICE_ROLES = (User.Roles.SEEKER, User.Roles.EMPLOYER)

    def to_internal_value(self, data):
        if any(not data.get(key) for key in self.REQUIRED):
            raise serializers.ValidationError({api_settings.NON_FIELD_ERRORS_KEY: ["All fields are required"]})
        return super().to_internal_value(data)

    def validate_role(self, value):
        if value not in self.SELF_SERVICE_ROLES:
            raise serializers.ValidationError("Invalid role")
        return value

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("Email already exists")
        return value.lower()

    def validate_username(self, value):
        if User.objects.filter(username=value).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data['username'],
            email=validated_data['email'],
            password=validated_data['password'],
            role=validated_data['role'],
            phone=validated_data.get('phone') or None,
            company_name=validated_data.get('company_name') or None,
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
