from django.db import models
from django.conf import settings
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .salary import parse_salary


def resume_upload_path(instance, filename):
    extension = filename.rsplit('.', 1)[-1].lower() if '.' in filename else 'pdf'
    stamp = int(timezone.now().timestamp() * 1000)
    return f"resumes/{instance.seeker_id}-{stamp}.{extension}"


class Job(models.Model):
    class JobType(models.TextChoices):
        FULL_TIME = 'full-time', _('Full Time')
        PART_TIME = 'part-time', _('Part Time')
        CONTRACT = 'contract', _('Contract')

    class ExperienceLevel(models.TextChoices):
        ENTRY = 'entry', _('Entry Level')
        MID = 'mid', _('Mid Level')
        SENIOR = 'senior', _('Senior Level')
        EXECUTIVE = 'executive', _('Executive')

    employer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='posted_jobs',
        null=True,
        blank=True,
    )
    title = models.CharField(max_length=255)
    description = models.TextField()
    company = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    salary = models.CharField(max_length=100)  # Free text, e.g. "$80k - $100k"
    job_type = models.CharField(max_length=20, choices=JobType.choices)

    requirements = models.JSONField(default=list, blank=True)
    benefits = models.JSONField(default=list, blank=True)
    skills = models.JSONField(default=list, blank=True)

    application_deadline = models.DateField(null=True, blank=True)
    experience_level = models.CharField(
        max_length=20,
        choices=ExperienceLevel.choices,
        null=True,
        blank=True,
    )
    remote = models.BooleanField(default=False)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} @ {self.company}"

    @property
    def salary_amount(self):
        return parse_salary(self.salary)


class Application(models.Model):
    class Status(models.TextChoices):
        PENDING = 'pending', _('Pending')
        ACCEPTED = 'accepted', _('Accepted')
        REJECTED = 'rejected', _('Rejected')
        INTERVIEW = 'interview', _('Interview')
        HIRED = 'hired', _('Hired')

    # Statuses an employer may set; pending is only the initial value
    EMPLOYER_STATUSES = (Status.ACCEPTED, Status.REJECTED, Status.HIRED, Status.INTERVIEW)

    job = models.ForeignKey(Job, on_delete=models.CASCADE, related_name='applications')
    seeker = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='job_applications'
    )
    resume = models.FileField(upload_to=resume_upload_path)
    cover_letter = models.TextField(blank=True, null=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING
    )
    interview_date = models.DateTimeField(null=True, blank=True)
    ats_score = models.PositiveSmallIntegerField(null=True, blank=True)

    applied_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        unique_together = ('job', 'seeker')  # Prevent double applying
        ordering = ['-applied_at']

    def __str__(self):
        return f"{self.seeker.username} -> {self.job.title}"


class JobView(models.Model):
    """
    One row per (job, viewer); the count of rows is the job's view count.
    """
    job = models.ForeignKey(Job, on_delete=models.CASCADE, related_name='job_views')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='job_views')
    viewed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('job', 'user')

    def __str__(self):
        return f"{self.user_id} viewed {self.job_id}"
