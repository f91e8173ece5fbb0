from django.contrib.auth import get_user_model
from django.db.models import Q
from django.utils import timezone
from rest_framework import serializers

from jobs.serializers import JobSerializer
from .models import CompanyReview, OfficePhoto
from .services import salary_range

User = get_user_model()


def _file_url(field):
    return field.url if field else None


class CompanyReviewSerializer(serializers.ModelSerializer):
    company_id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    rating = serializers.IntegerField(
        min_value=1,
        max_value=5,
        error_messages={
            'min_value': "Rating must be between 1 and 5",
            'max_value': "Rating must be between 1 and 5",
            'required': "Rating is required",
            'invalid': "Rating must be between 1 and 5",
        },
    )

    class Meta:
        model = CompanyReview
        fields = [
            'id', 'company_id', 'user_id', 'rating', 'pros', 'cons',
            'review', 'position', 'is_verified', 'created_at',
        ]
        read_only_fields = ['id', 'company_id', 'user_id', 'is_verified', 'created_at']


class CompanySummarySerializer(serializers.ModelSerializer):
    """
    One card in the company directory.
    """
    logo_url = serializers.SerializerMethodField()
    avg_rating = serializers.SerializerMethodField()
    review_count = serializers.IntegerField(read_only=True)
    recent_review = serializers.SerializerMethodField()
    recent_position = serializers.SerializerMethodField()
    salary_range = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id', 'company_name', 'industry', 'company_size', 'logo_url',
            'avg_rating', 'review_count', 'recent_review', 'recent_position', 'salary_range',
        ]

    def _latest_review(self, obj):
        if not hasattr(obj, '_latest_review'):
            obj._latest_review = obj.company_reviews.order_by('-created_at').first()
        return obj._latest_review

    def get_logo_url(self, obj):
        return _file_url(obj.logo)

    def get_avg_rating(self, obj):
        return round(obj.avg_rating or 0, 1)

    def get_recent_review(self, obj):
        review = self._latest_review(obj)
        return review.review if review else None

    def get_recent_position(self, obj):
        review = self._latest_review(obj)
        return review.position if review else None

    def get_salary_range(self, obj):
        return salary_range(obj)


class BrandingSerializer(serializers.ModelSerializer):
    """
    Employer company page. Accepts a `logo` upload and any number of
    `office_photos` uploads, which are added to the existing gallery.
    """
    employer_id = serializers.IntegerField(source='id', read_only=True)
    about = serializers.CharField(source='company_description', required=False, allow_blank=True, allow_null=True)
    logo = serializers.ImageField(write_only=True, required=False)
    logo_url = serializers.SerializerMethodField()
    office_photos = serializers.ListField(child=serializers.ImageField(), write_only=True, required=False)

    class Meta:
        model = User
        fields = [
            'employer_id', 'company_name', 'industry', 'website', 'about', 'culture',
            'benefits', 'company_size', 'location', 'founded', 'logo', 'logo_url', 'office_photos',
        ]

    def get_logo_url(self, obj):
        return _file_url(obj.logo)

    def update(self, instance, validated_data):
        photos = validated_data.pop('office_photos', [])
        instance = super().update(instance, validated_data)
        for photo in photos:
            OfficePhoto.objects.create(employer=instance, image=photo)
        return instance

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['office_photos'] = [photo.image.url for photo in instance.office_photos.all()]
        return data


class CompanyDetailSerializer(BrandingSerializer):
    avg_rating = serializers.SerializerMethodField()
    review_count = serializers.SerializerMethodField()
    jobs = serializers.SerializerMethodField()
    reviews = serializers.SerializerMethodField()

    class Meta(BrandingSerializer.Meta):
        fields = BrandingSerializer.Meta.fields + ['avg_rating', 'review_count', 'jobs', 'reviews']

    def get_avg_rating(self, obj):
        return round(getattr(obj, 'avg_rating', None) or 0, 1)

    def get_review_count(self, obj):
        return obj.company_reviews.count()

    def get_jobs(self, obj):
        open_jobs = obj.posted_jobs.filter(
            Q(application_deadline__isnull=True) | Q(application_deadline__gte=timezone.localdate())
        )
        return JobSerializer(open_jobs, many=True).data

    def get_reviews(self, obj):
        return CompanyReviewSerializer(obj.company_reviews.all(), many=True).data
