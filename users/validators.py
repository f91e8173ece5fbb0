import os

from django.conf import settings
from rest_framework import serializers

PDF_CONTENT_TYPES = ('application/pdf',)


def validate_resume_file(upload):
    """
    Resumes must be PDFs within RESUME_MAX_UPLOAD_SIZE.
    """
    if upload is None:
        raise serializers.ValidationError("Resume file is required")

    content_type = getattr(upload, 'content_type', '')
    extension = os.path.splitext(upload.name)[1].lower()
    if content_type not in PDF_CONTENT_TYPES and extension != '.pdf':
        raise serializers.ValidationError("Only PDF files are allowed")

    max_size = settings.RESUME_MAX_UPLOAD_SIZE
    if upload.size > max_size:
        raise serializers.ValidationError(
            f"File too large. Maximum size: {max_size // (1024 * 1024)}MB"
        )
    return upload
