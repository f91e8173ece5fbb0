from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class CompanyReview(models.Model):
    """
    A seeker's review of an employer. `company` is the employer account,
    since branding lives on the user.
    """
    company = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='company_reviews'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='written_reviews'
    )
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    pros = models.TextField(blank=True, null=True)
    cons = models.TextField(blank=True, null=True)
    review = models.TextField(blank=True, null=True)
    position = models.CharField(max_length=255, blank=True, null=True)
    is_verified = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('company', 'user')
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.rating}/5 for {self.company_id} by {self.user_id}"


class OfficePhoto(models.Model):
    employer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='office_photos'
    )
    image = models.ImageField(upload_to='office_photos/')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at']

    def __str__(self):
        return f"Office photo {self.pk} of {self.employer_id}"
